"""Test fixture utilities for loading version payloads.

Fixtures live in ``versions/`` as one JSON object per file.

Usage:
    from tests.unit.fixtures import load_version_fixture

    def test_decode():
        payload = load_version_fixture("version_latest")
        record = VersionRecord.from_json(payload)
"""

import json
from pathlib import Path

FIXTURES_DIR = Path(__file__).parent


def load_version_fixture(name: str) -> dict:
    """Load a version fixture by name, with or without the ``.json`` extension.

    Raises:
        FileNotFoundError: If the fixture doesn't exist.
    """
    if not name.endswith(".json"):
        name = f"{name}.json"
    path = FIXTURES_DIR / "versions" / name
    if not path.is_file():
        raise FileNotFoundError(f"Fixture not found: {path}")
    with open(path) as f:
        return json.load(f)
