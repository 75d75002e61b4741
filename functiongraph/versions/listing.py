"""List the versions of a function."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Optional
from urllib.parse import quote

import requests

from functiongraph._core._request import RequestConfig, request
from functiongraph.pagination import Pager
from functiongraph.system import System
from functiongraph.versions.results import VersionPage

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ListOpts:
    """Query options of the versions listing.

    Attributes:
        marker: Offset to start from; the pager overrides it after the first page.
        maxitems: Maximum number of versions per page, as the service expects it.
    """

    marker: str = ""
    maxitems: str = ""

    def to_query(self) -> Dict[str, str]:
        """Query parameters, leaving out unset options."""
        query = {"marker": self.marker, "maxitems": self.maxitems}
        return {key: value for key, value in query.items() if value}


def list_url(system: System, function_urn: str) -> str:
    return (
        f"{system.endpoint}/v2/{system.project_id}/fgs/functions/"
        f"{quote(function_urn, safe=':')}/versions"
    )


def list_versions(
    session: requests.Session,
    system: System,
    function_urn: str,
    opts: Optional[ListOpts] = None,
) -> Pager:
    """Return a pager over the versions of *function_urn*.

    Nothing is requested until the pager is iterated.

    Parameters:
        session: Session used for every page request; it must already carry
            whatever authentication the service requires.
        system: Endpoint, project and timeout to use.
        function_urn: URN of the function whose versions are listed.
        opts: Starting marker and page size.

    Returns:
        A ``Pager`` yielding ``VersionPage`` objects.

    Examples:
        >>> pager = list_versions(session, System.from_environ(), urn)  # doctest: +SKIP
        >>> versions = pager.all_items(extract_versions)  # doctest: +SKIP
    """
    opts = opts or ListOpts()
    url = list_url(system, function_urn)

    def fetch(marker: str) -> VersionPage:
        params = ListOpts(marker=marker, maxitems=opts.maxitems).to_query()
        resp = request(
            session,
            RequestConfig(url=url, params=params, timeout=system.timeout),
        )
        return VersionPage.from_response(resp, marker=marker)

    logger.debug("Listing versions of %s", function_urn)
    return Pager(fetch, initial_marker=opts.marker)
