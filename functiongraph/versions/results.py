"""Result classes for listing function versions.

This module provides the ``VersionRecord`` value object (and the configurations
embedded in it) plus ``VersionPage``, the page type that understands the
``next_marker``/``count`` pagination envelope of the versions endpoint.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Mapping, Tuple

from typing_extensions import Self

from functiongraph._core._validators import (
    qualify,
    require_field,
    require_mapping,
)
from functiongraph.pagination import Page

# Scalar wire fields of a version, in wire order. Nested objects are decoded
# separately in VersionRecord.from_json.
_VERSION_SCALARS: Tuple[Tuple[str, type], ...] = (
    ("func_urn", str),
    ("func_name", str),
    ("domain_id", str),
    ("namespace", str),
    ("project_name", str),
    ("package", str),
    ("runtime", str),
    ("timeout", int),
    ("handle", str),
    ("memory_size", int),
    ("cpu", int),
    ("code_type", str),
    ("code_url", str),
    ("code_filename", str),
    ("code_size", int),
    ("user_data", str),
    ("encrypted_user_data", str),
    ("digest", str),
    ("version", str),
    ("image_name", str),
    ("xrole", str),
    ("app_xrole", str),
    ("last_modified", str),
    ("func_vpc_id", str),
    ("concurrency", int),
    ("concurrent_num", int),
    ("initializer_handler", str),
    ("initializer_timeout", int),
    ("long_time", bool),
    ("type", str),
    ("enable_cloud_debug", str),
    ("enable_dynamic_memory", bool),
    ("enterprise_project_id", str),
    ("is_stateful_function", bool),
    ("enable_auth_in_header", bool),
    ("reserved_instance_idle_mode", bool),
)


def _read_scalars(
    payload: Mapping[str, Any], spec: Tuple[Tuple[str, type], ...], path: str
) -> Dict[str, Any]:
    return {name: require_field(payload, name, kind, path) for name, kind in spec}


@dataclass(frozen=True)
class StrategyConfig:
    """Concurrency policy of a function.

    Attributes:
        concurrency: Maximum number of instances; -1 is unlimited, 0 disables
            the function.
        concurrent_num: Maximum number of concurrent requests per instance.
    """

    concurrency: int
    concurrent_num: int

    @classmethod
    def from_json(cls, payload: Mapping[str, Any], path: str = "") -> Self:
        require_mapping(payload, path)
        return cls(
            concurrency=require_field(payload, "concurrency", int, path),
            concurrent_num=require_field(payload, "concurrent_num", int, path),
        )

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class Destination:
    """Target invoked after an asynchronous execution.

    Attributes:
        destination: Kind of target: ``OBS``, ``SMN``, ``DIS`` or ``FunctionGraph``.
        param: JSON-encoded parameters for the target, kept as an opaque string.
    """

    destination: str
    param: str

    @classmethod
    def from_json(cls, payload: Mapping[str, Any], path: str = "") -> Self:
        require_mapping(payload, path)
        return cls(
            destination=require_field(payload, "destination", str, path),
            param=require_field(payload, "param", str, path),
        )

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class DestinationConfig:
    """Success and failure routing for asynchronous invocations."""

    on_success: Destination
    on_failure: Destination

    @classmethod
    def from_json(cls, payload: Mapping[str, Any], path: str = "") -> Self:
        require_mapping(payload, path)
        return cls(
            on_success=Destination.from_json(
                require_field(payload, "on_success", dict, path),
                qualify(path, "on_success"),
            ),
            on_failure=Destination.from_json(
                require_field(payload, "on_failure", dict, path),
                qualify(path, "on_failure"),
            ),
        )

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class FunctionAsyncConfig:
    """Asynchronous invocation settings.

    Attributes:
        max_async_event_age_in_second: Message time-to-live, 60 to 86400 seconds.
        max_async_retry_attempts: Retries after a failed invocation, 0 to 8.
        destination_config: Where results are routed.
        created_time: When the settings were created.
        last_modified: When the settings were last changed.
    """

    max_async_event_age_in_second: int
    max_async_retry_attempts: int
    destination_config: DestinationConfig
    created_time: str
    last_modified: str

    @classmethod
    def from_json(cls, payload: Mapping[str, Any], path: str = "") -> Self:
        require_mapping(payload, path)
        return cls(
            max_async_event_age_in_second=require_field(
                payload, "max_async_event_age_in_second", int, path
            ),
            max_async_retry_attempts=require_field(
                payload, "max_async_retry_attempts", int, path
            ),
            destination_config=DestinationConfig.from_json(
                require_field(payload, "destination_config", dict, path),
                qualify(path, "destination_config"),
            ),
            created_time=require_field(payload, "created_time", str, path),
            last_modified=require_field(payload, "last_modified", str, path),
        )

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class CustomImage:
    """Container image the function runs in instead of a runtime."""

    enabled: bool
    image: str
    command: str
    args: str
    working_dir: str
    uid: str
    gid: str

    @classmethod
    def from_json(cls, payload: Mapping[str, Any], path: str = "") -> Self:
        require_mapping(payload, path)
        return cls(
            enabled=require_field(payload, "enabled", bool, path),
            image=require_field(payload, "image", str, path),
            command=require_field(payload, "command", str, path),
            args=require_field(payload, "args", str, path),
            working_dir=require_field(payload, "working_dir", str, path),
            uid=require_field(payload, "uid", str, path),
            gid=require_field(payload, "gid", str, path),
        )

    def to_json(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class VersionRecord:
    """Snapshot of one function version as reported by the service.

    Attribute names match the wire keys exactly, ``is_stateful_function``
    included. Only the less obvious ones are listed here.

    Attributes:
        namespace: Project ID the function lives in.
        runtime: Execution environment, e.g. ``Python3.9`` or ``Custom``.
        timeout: Maximum execution time in seconds.
        memory_size: Memory in MB.
        cpu: CPU in millicores.
        code_type: ``inline``, ``zip``, ``obs`` or ``jar``.
        digest: SHA512 of the function code.
        version: Version label, e.g. ``v20240101-120000`` or ``latest``.
        concurrency: 0 when the function is disabled, -1 when enabled.
        enable_cloud_debug: Sent as a string by the service.
    """

    func_urn: str
    func_name: str
    domain_id: str
    namespace: str
    project_name: str
    package: str
    runtime: str
    timeout: int
    handle: str
    memory_size: int
    cpu: int
    code_type: str
    code_url: str
    code_filename: str
    code_size: int
    user_data: str
    encrypted_user_data: str
    digest: str
    version: str
    image_name: str
    xrole: str
    app_xrole: str
    last_modified: str
    func_vpc_id: str
    concurrency: int
    concurrent_num: int
    strategy_config: StrategyConfig
    initializer_handler: str
    initializer_timeout: int
    long_time: bool
    function_async_config: FunctionAsyncConfig
    type: str
    enable_cloud_debug: str
    enable_dynamic_memory: bool
    enterprise_project_id: str
    is_stateful_function: bool
    enable_auth_in_header: bool
    custom_image: CustomImage
    reserved_instance_idle_mode: bool

    @classmethod
    def from_json(cls, payload: Mapping[str, Any], path: str = "") -> Self:
        """Decode one version object.

        Parameters:
            payload: The decoded JSON object.
            path: Field path of *payload*, used in error messages.

        Raises:
            DecodeError: If a field is missing, ``null`` or of the wrong type.
        """
        require_mapping(payload, path)
        values = _read_scalars(payload, _VERSION_SCALARS, path)
        values["strategy_config"] = StrategyConfig.from_json(
            require_field(payload, "strategy_config", dict, path),
            qualify(path, "strategy_config"),
        )
        values["function_async_config"] = FunctionAsyncConfig.from_json(
            require_field(payload, "function_async_config", dict, path),
            qualify(path, "function_async_config"),
        )
        values["custom_image"] = CustomImage.from_json(
            require_field(payload, "custom_image", dict, path),
            qualify(path, "custom_image"),
        )
        return cls(**values)

    def to_json(self) -> Dict[str, Any]:
        """Encode back to the wire shape."""
        return asdict(self)


@dataclass(frozen=True)
class PageInfo:
    """Decoded envelope of one versions page."""

    versions: List[VersionRecord]
    next_marker: int
    count: int

    @classmethod
    def from_json(cls, payload: Any) -> Self:
        require_mapping(payload)
        raw_versions = require_field(payload, "versions", list)
        return cls(
            versions=[
                VersionRecord.from_json(item, f"versions[{i}]")
                for i, item in enumerate(raw_versions)
            ],
            next_marker=require_field(payload, "next_marker", int),
            count=require_field(payload, "count", int),
        )


def extract_page_info(page: Page) -> PageInfo:
    """Decode the envelope of a versions page.

    Raises:
        DecodeError: If the body is not JSON or does not have the envelope shape.
    """
    return PageInfo.from_json(page.json())


def extract_versions(page: Page) -> List[VersionRecord]:
    """Return the versions held by a single page."""
    return extract_page_info(page).versions


class VersionPage(Page):
    """A page of the versions listing.

    Every call decodes the body afresh; a page holds no derived state.
    """

    def is_empty(self) -> bool:
        """True if the page lists no versions."""
        return len(extract_page_info(self).versions) == 0

    def next_marker(self) -> str:
        """Marker for the following request, or ``""`` once all versions are listed.

        The service reports a running offset in ``next_marker`` and the total
        in ``count``; the two are equal on the last page, whatever its size.
        """
        info = extract_page_info(self)
        if info.next_marker == info.count:
            return ""
        return str(info.next_marker)
