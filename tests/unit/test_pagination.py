"""Tests for the generic marker pager."""

from unittest.mock import Mock

import pytest

from functiongraph import DecodeError, PaginationError, Pager, VersionPage
from functiongraph.pagination import Page
from functiongraph.versions import extract_versions


def create_mock_page(empty: bool = False, next_marker: str = "") -> Mock:
    """A page stand-in that only answers the pager's two questions."""
    page = Mock()
    page.is_empty.return_value = empty
    page.next_marker.return_value = next_marker
    return page


class TestPagerWithMockPages:
    def test_stops_on_empty_first_page(self) -> None:
        fetch = Mock(return_value=create_mock_page(empty=True))

        assert list(Pager(fetch)) == []
        fetch.assert_called_once_with("")

    def test_follows_markers_until_blank(self) -> None:
        pages = [
            create_mock_page(next_marker="20"),
            create_mock_page(next_marker="40"),
            create_mock_page(next_marker=""),
        ]
        fetch = Mock(side_effect=pages)

        assert list(Pager(fetch).pages()) == pages
        assert [c.args[0] for c in fetch.call_args_list] == ["", "20", "40"]

    def test_empty_page_after_marker_stops(self) -> None:
        pages = [create_mock_page(next_marker="20"), create_mock_page(empty=True)]
        fetch = Mock(side_effect=pages)

        assert list(Pager(fetch)) == pages[:1]
        # an empty page is never asked for a next marker
        pages[1].next_marker.assert_not_called()

    def test_initial_marker(self) -> None:
        fetch = Mock(return_value=create_mock_page(next_marker=""))

        list(Pager(fetch, initial_marker="40"))

        fetch.assert_called_once_with("40")

    def test_repeated_marker_raises(self) -> None:
        fetch = Mock(return_value=create_mock_page(next_marker="20"))
        pager = Pager(fetch)

        with pytest.raises(PaginationError, match="'20'"):
            list(pager)

        assert fetch.call_count == 2

    def test_marker_cycle_raises(self) -> None:
        pages = [
            create_mock_page(next_marker="20"),
            create_mock_page(next_marker="40"),
            create_mock_page(next_marker="20"),
        ]
        fetch = Mock(side_effect=pages)

        with pytest.raises(PaginationError, match="'20'"):
            list(Pager(fetch))

        assert [c.args[0] for c in fetch.call_args_list] == ["", "20", "40"]

    def test_cycle_back_to_initial_marker_raises(self) -> None:
        pages = [create_mock_page(next_marker="20"), create_mock_page(next_marker="40")]
        fetch = Mock(side_effect=pages)

        with pytest.raises(PaginationError, match="'40'"):
            list(Pager(fetch, initial_marker="40"))

        assert fetch.call_count == 2

    def test_pages_are_lazy(self) -> None:
        fetch = Mock(return_value=create_mock_page(next_marker=""))
        pager = Pager(fetch)

        fetch.assert_not_called()
        next(iter(pager))
        fetch.assert_called_once()

    def test_walks_are_independent(self) -> None:
        fetch = Mock(side_effect=lambda marker: create_mock_page(next_marker=""))
        pager = Pager(fetch)

        assert len(list(pager)) == 1
        assert len(list(pager)) == 1
        assert fetch.call_count == 2


class TestPagerWithVersionPages:
    """End-to-end walks over decoded versions pages."""

    def test_three_page_listing(self, make_versions, page_body) -> None:
        bodies = {
            "": page_body(make_versions(20, start=1), next_marker=20, count=45),
            "20": page_body(make_versions(20, start=21), next_marker=40, count=45),
            "40": page_body(make_versions(5, start=41), next_marker=45, count=45),
        }
        fetch = Mock(side_effect=lambda marker: VersionPage(bodies[marker], marker))

        pages = list(Pager(fetch))

        assert [p.marker for p in pages] == ["", "20", "40"]
        assert [p.next_marker() for p in pages] == ["20", "40", ""]
        # the last page has content but still ends the walk
        assert pages[-1].is_empty() is False
        assert fetch.call_count == 3

    def test_all_items(self, make_versions, page_body) -> None:
        bodies = {
            "": page_body(make_versions(20, start=1), next_marker=20, count=45),
            "20": page_body(make_versions(20, start=21), next_marker=40, count=45),
            "40": page_body(make_versions(5, start=41), next_marker=45, count=45),
        }
        pager = Pager(lambda marker: VersionPage(bodies[marker], marker))

        versions = pager.all_items(extract_versions)

        assert len(versions) == 45
        assert versions[0].version == "v1"
        assert versions[-1].version == "v45"

    def test_no_versions(self, page_body) -> None:
        pager = Pager(lambda marker: VersionPage(page_body([], 0, 0), marker))

        assert pager.all_items(extract_versions) == []

    def test_decode_error_stops_walk(self, make_versions, page_body) -> None:
        bodies = {
            "": page_body(make_versions(20), next_marker=20, count=45),
            "20": b'{"versions": [{}], "next_marker": 40, "count": 45}',
        }
        pager = Pager(lambda marker: VersionPage(bodies[marker], marker))
        walk = pager.pages()

        next(walk)
        with pytest.raises(DecodeError):
            next(walk)


class TestPage:
    def test_from_response(self) -> None:
        response = Mock()
        response.content = b'{"versions": [], "next_marker": 0, "count": 0}'

        page = VersionPage.from_response(response, marker="20")

        assert isinstance(page, VersionPage)
        assert page.marker == "20"
        assert page.is_empty() is True

    def test_json(self) -> None:
        assert Page(b'{"a": 1}').json() == {"a": 1}

    def test_pages_hash_by_identity(self) -> None:
        body = {"versions": [], "next_marker": 0, "count": 0}
        page = VersionPage(body)

        assert {page: "seen"}[page] == "seen"
        assert page != VersionPage(body)
