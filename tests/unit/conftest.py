"""Pytest configuration and shared fixtures for unit tests."""

import copy
import json
from typing import Any, Callable, Dict, List

import pytest

from functiongraph import System
from tests.unit.fixtures import load_version_fixture

FUNCTION_URN = (
    "urn:fss:cn-north-4:46b6f338fc3445b8846c71dfb1fbd9e8:function:default:hello-world"
)


@pytest.fixture
def version_payload() -> Dict[str, Any]:
    """A fresh, mutable copy of a complete version object."""
    return load_version_fixture("version_latest")


@pytest.fixture
def make_versions(version_payload) -> Callable[[int], List[Dict[str, Any]]]:
    """Build *n* distinct version objects, labelled ``v1`` .. ``vN``."""

    def _make(n: int, start: int = 1) -> List[Dict[str, Any]]:
        versions = []
        for i in range(start, start + n):
            item = copy.deepcopy(version_payload)
            item["version"] = f"v{i}"
            item["func_urn"] = item["func_urn"].rsplit(":", 1)[0] + f":v{i}"
            versions.append(item)
        return versions

    return _make


@pytest.fixture
def page_body() -> Callable[..., bytes]:
    """Encode a versions envelope the way the service sends it."""

    def _body(versions: List[Dict[str, Any]], next_marker: int, count: int) -> bytes:
        return json.dumps(
            {"versions": versions, "next_marker": next_marker, "count": count}
        ).encode("utf-8")

    return _body


@pytest.fixture
def system() -> System:
    return System(
        endpoint="https://functiongraph.cn-north-4.myhuaweicloud.com",
        project_id="46b6f338fc3445b8846c71dfb1fbd9e8",
        timeout=10,
    )


@pytest.fixture
def function_urn() -> str:
    return FUNCTION_URN
