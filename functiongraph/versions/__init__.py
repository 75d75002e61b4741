"""Function version listing: result types, the page adapter and the list call."""

from functiongraph.versions.listing import ListOpts, list_url, list_versions
from functiongraph.versions.results import (
    CustomImage,
    Destination,
    DestinationConfig,
    FunctionAsyncConfig,
    PageInfo,
    StrategyConfig,
    VersionPage,
    VersionRecord,
    extract_page_info,
    extract_versions,
)

__all__ = [
    # results.py
    "VersionRecord",
    "StrategyConfig",
    "FunctionAsyncConfig",
    "DestinationConfig",
    "Destination",
    "CustomImage",
    "PageInfo",
    "VersionPage",
    "extract_page_info",
    "extract_versions",
    # listing.py
    "ListOpts",
    "list_url",
    "list_versions",
]
