"""Generic marker pagination.

A listing is walked by fetching one page per marker. Each page decides for
itself whether it is empty and which marker comes next; the ``Pager`` only
drives the loop.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterator, List, Mapping, TypeVar, Union

import requests
from typing_extensions import Protocol, Self

from functiongraph._core._validators import load_json
from functiongraph.exceptions import PaginationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Body = Union[bytes, str, Mapping[str, Any]]


class MarkerPage(Protocol):
    """What a ``Pager`` needs from each page it fetches."""

    def is_empty(self) -> bool: ...

    def next_marker(self) -> str: ...


@dataclass(frozen=True, eq=False)
class Page:
    """The raw body of one list response and the marker that produced it.

    Pages compare and hash by identity, whatever their body holds.
    """

    body: Body
    marker: str = ""

    @classmethod
    def from_response(cls, response: requests.Response, marker: str = "") -> Self:
        return cls(body=response.content, marker=marker)

    def json(self) -> Any:
        """Parse the body; raises ``DecodeError`` if it is not JSON."""
        return load_json(self.body)


class Pager:
    """Walk a marker-paginated listing.

    Parameters:
        fetch: Called with the marker to request, returns the page for it.
        initial_marker: Marker for the first request, empty for the start.

    Examples:
        >>> pager = Pager(lambda marker: fetch_page(marker))  # doctest: +SKIP
        >>> for page in pager:  # doctest: +SKIP
        ...     print(page.marker)
    """

    def __init__(
        self, fetch: Callable[[str], MarkerPage], initial_marker: str = ""
    ) -> None:
        self.fetch = fetch
        self.initial_marker = initial_marker

    def pages(self) -> Iterator[MarkerPage]:
        """Yield pages until one is empty or reports no next marker.

        A page whose next marker is non-empty is followed even when it holds
        fewer items than earlier pages; only the page itself decides the end.

        Raises:
            PaginationError: If a page hands back a marker already fetched in
                this walk.
        """
        marker = self.initial_marker
        seen = {marker}
        fetched = 0
        while True:
            logger.debug("Fetching page %d at marker %r", fetched + 1, marker)
            page = self.fetch(marker)
            fetched += 1

            if page.is_empty():
                logger.debug("Page at marker %r is empty, stopping", marker)
                return

            yield page

            next_marker = page.next_marker()
            if not next_marker:
                logger.debug("Listing exhausted after %d page(s)", fetched)
                return
            if next_marker in seen:
                raise PaginationError(
                    f"Marker {next_marker!r} from page {fetched} was already fetched"
                )
            seen.add(next_marker)
            marker = next_marker

    def __iter__(self) -> Iterator[MarkerPage]:
        return self.pages()

    def all_items(self, extract: Callable[[Any], List[T]]) -> List[T]:
        """Concatenate ``extract(page)`` over every page of the listing."""
        items: List[T] = []
        for page in self.pages():
            items.extend(extract(page))
        return items
