"""Service endpoint configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

from functiongraph.exceptions import ConfigurationError

ENDPOINT_ENV = "FGS_ENDPOINT"
PROJECT_ID_ENV = "FGS_PROJECT_ID"
TIMEOUT_ENV = "FGS_TIMEOUT"

DEFAULT_TIMEOUT = 30


@dataclass(frozen=True)
class System:
    """Where FunctionGraph list calls are sent.

    Attributes:
        endpoint: Base URL of the FunctionGraph API, without a trailing slash.
        project_id: Project the functions belong to.
        timeout: Per-request timeout in seconds.
    """

    endpoint: str
    project_id: str
    timeout: int = DEFAULT_TIMEOUT

    def __post_init__(self) -> None:
        if not self.endpoint:
            raise ConfigurationError("endpoint must not be empty")
        if not self.project_id:
            raise ConfigurationError("project_id must not be empty")
        if self.timeout <= 0:
            raise ConfigurationError(
                f"timeout must be a positive number of seconds, got {self.timeout}"
            )
        # frozen, so normalise through object.__setattr__
        object.__setattr__(self, "endpoint", self.endpoint.rstrip("/"))

    @classmethod
    def for_region(
        cls, region: str, project_id: str, timeout: int = DEFAULT_TIMEOUT
    ) -> "System":
        """Build the configuration for a public region, e.g. ``cn-north-4``."""
        return cls(
            endpoint=f"https://functiongraph.{region}.myhuaweicloud.com",
            project_id=project_id,
            timeout=timeout,
        )

    @classmethod
    def from_environ(cls, environ: Optional[Mapping[str, str]] = None) -> "System":
        """Read the configuration from ``FGS_ENDPOINT``, ``FGS_PROJECT_ID`` and ``FGS_TIMEOUT``.

        Parameters:
            environ: Mapping to read from, defaults to ``os.environ``.

        Raises:
            ConfigurationError: If a required variable is unset or the timeout
                is not a positive integer.
        """
        environ = os.environ if environ is None else environ

        missing = [
            name for name in (ENDPOINT_ENV, PROJECT_ID_ENV) if not environ.get(name)
        ]
        if missing:
            raise ConfigurationError(
                f"Missing required environment variables: {', '.join(missing)}"
            )

        raw_timeout = environ.get(TIMEOUT_ENV)
        timeout = DEFAULT_TIMEOUT
        if raw_timeout:
            try:
                timeout = int(raw_timeout)
            except ValueError as exc:
                raise ConfigurationError(
                    f"{TIMEOUT_ENV} must be an integer number of seconds, got {raw_timeout!r}"
                ) from exc

        return cls(
            endpoint=environ[ENDPOINT_ENV],
            project_id=environ[PROJECT_ID_ENV],
            timeout=timeout,
        )
