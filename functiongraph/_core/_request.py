"""Core HTTP request wrapper used by the list calls."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, MutableMapping

import requests

from functiongraph.exceptions import RequestError

log = logging.getLogger(__name__)


@dataclass
class RequestConfig:
    """Configuration for a single request."""

    method: str = "GET"
    url: str = ""
    params: Mapping[str, Any] = field(default_factory=dict)
    headers: MutableMapping[str, str] = field(default_factory=dict)
    timeout: int = 30


def request(session: requests.Session, config: RequestConfig) -> requests.Response:
    """Perform one HTTP request through *session*.

    Authentication is the session's concern: signing adapters or auth hooks
    installed on it apply to every call made here.

    Args:
        session: The caller's ``requests.Session``.
        config: Fully populated ``RequestConfig`` instance.

    Returns:
        The ``requests.Response`` of a successful (2xx) call.

    Raises:
        RequestError: If the service answers with an error status.
        requests.RequestException: If the transport itself fails.
    """
    headers = dict(config.headers)  # copy to avoid mutating caller data
    headers.setdefault("Accept", "application/json")

    log.debug("%s %s params=%s", config.method, config.url, dict(config.params))
    resp = session.request(
        method=config.method,
        url=config.url,
        params=config.params,
        headers=headers,
        timeout=config.timeout,
    )

    try:
        resp.raise_for_status()
    except requests.HTTPError as exc:
        log.warning(
            "%s %s failed with status %s", config.method, config.url, resp.status_code
        )
        raise RequestError(
            f"{config.method} {config.url} returned {resp.status_code}",
            status_code=resp.status_code,
            body=resp.text,
        ) from exc
    return resp
