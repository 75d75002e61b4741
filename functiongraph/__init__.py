"""functiongraph: typed listing of FunctionGraph function versions.

Quick Start:
    ```python
    import requests
    import functiongraph

    system = functiongraph.System.from_environ()
    session = requests.Session()  # must carry request signing

    pager = functiongraph.list_versions(session, system, function_urn)
    versions = pager.all_items(functiongraph.extract_versions)
    ```

Decoding a page body you already hold:
    ```python
    page = functiongraph.VersionPage(body)
    page.is_empty()
    page.next_marker()  # "" once every version has been listed
    ```
"""

import logging
from importlib.metadata import version

from .exceptions import (
    ConfigurationError,
    DecodeError,
    FunctionGraphError,
    PaginationError,
    RequestError,
)
from .pagination import MarkerPage, Page, Pager
from .system import System
from .versions import (
    CustomImage,
    Destination,
    DestinationConfig,
    FunctionAsyncConfig,
    ListOpts,
    StrategyConfig,
    VersionPage,
    VersionRecord,
    extract_versions,
    list_versions,
)

logger = logging.getLogger(__name__)

__all__ = [
    # exceptions.py
    "FunctionGraphError",
    "DecodeError",
    "PaginationError",
    "RequestError",
    "ConfigurationError",
    # pagination.py
    "MarkerPage",
    "Page",
    "Pager",
    # system.py
    "System",
    # versions
    "VersionRecord",
    "StrategyConfig",
    "FunctionAsyncConfig",
    "DestinationConfig",
    "Destination",
    "CustomImage",
    "VersionPage",
    "extract_versions",
    "ListOpts",
    "list_versions",
]

__version__ = version("functiongraph-versions")
