"""Typed field readers used when decoding service responses."""

from __future__ import annotations

import json
from typing import Any, Mapping, Union

from functiongraph.exceptions import DecodeError

_JSON_NAMES = {
    str: "string",
    int: "integer",
    bool: "boolean",
    dict: "object",
    list: "array",
}


def qualify(path: str, key: str) -> str:
    """Join a dotted field path and a key."""
    return f"{path}.{key}" if path else key


def load_json(body: Union[bytes, str, Mapping[str, Any]]) -> Any:
    """Parse a raw response body, passing already-decoded mappings through."""
    if isinstance(body, Mapping):
        return body
    try:
        return json.loads(body)
    except (TypeError, ValueError) as exc:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        raise DecodeError(f"Response body is not valid JSON: {exc}") from exc


def require_mapping(value: Any, path: str = "") -> Mapping[str, Any]:
    """Raise ``DecodeError`` unless *value* is a JSON object."""
    if not isinstance(value, Mapping):
        raise DecodeError(
            f"Expected a JSON object at {path or 'top level'}, "
            f"got {type(value).__name__}",
            field=path or None,
            value=value,
        )
    return value


def require_field(
    payload: Mapping[str, Any], key: str, kind: type, path: str = ""
) -> Any:
    """Return ``payload[key]`` after checking it is present and of JSON type *kind*.

    Missing keys and ``null`` values are errors; nothing is defaulted. Booleans are
    rejected where integers are expected even though ``bool`` subclasses ``int``.
    """
    field = qualify(path, key)
    if key not in payload:
        raise DecodeError(f"Missing required field {field!r}", field=field)

    value = payload[key]
    if kind is int:
        valid = isinstance(value, int) and not isinstance(value, bool)
    elif kind is dict:
        valid = isinstance(value, Mapping)
    else:
        valid = isinstance(value, kind)

    if not valid:
        raise DecodeError(
            f"Field {field!r} must be a JSON {_JSON_NAMES[kind]}, got {value!r}",
            field=field,
            value=value,
        )
    return value
