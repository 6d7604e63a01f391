"""Version registry - the table of supported API versions.

The registry maps each ApiVersion to a RegistryEntry holding the
version's handlers, its request/response mappers and its deprecation
flag. It is built once at startup by VersionRegistry.build(), which
validates completeness and raises RegistryConfigurationError on any
gap, so the application never starts with a partial table.

Usage:
    registry = VersionRegistry.build(
        [v1.ENTRY, v2.ENTRY],
        default_version=ApiVersion(2),
    )
    entry = registry.get(ApiVersion(1))
"""

import logging
from collections.abc import Awaitable, Callable, Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel

from app.core.exceptions import RegistryConfigurationError
from app.domain import Asset, AssetChanges, AssetId
from app.versioning.operations import AssetOperation
from app.versioning.version import ApiVersion

logger = logging.getLogger(__name__)

# (asset store, asset id, decoded changes or None) -> resulting asset
OperationHandler = Callable[[Any, AssetId, AssetChanges | None], Awaitable[Asset]]


@dataclass(frozen=True, kw_only=True)
class RequestMapper:
    """Decodes one version's request body into domain input.

    Attributes:
        model: Pydantic model describing the wire shape (used for docs)
        decode: Pure function from the parsed JSON body to AssetChanges
    """

    model: type[BaseModel]
    decode: Callable[[Any], AssetChanges]


@dataclass(frozen=True, kw_only=True)
class ResponseMapper:
    """Encodes a domain Asset into one version's response body.

    Attributes:
        model: Pydantic model describing the wire shape (used for docs)
        encode: Pure function from Asset to a JSON-ready dict
    """

    model: type[BaseModel]
    encode: Callable[[Asset], dict[str, Any]]


@dataclass(frozen=True, kw_only=True)
class RegistryEntry:
    """Everything the dispatcher needs for one API version.

    Attributes:
        version: The API version
        handlers: Operation -> handler for this version
        request_mapper: Request-body decoder
        response_mapper: Response-body encoder
        deprecated: Whether the version is deprecated (docs and headers only)
    """

    version: ApiVersion
    handlers: Mapping[AssetOperation, OperationHandler]
    request_mapper: RequestMapper | None
    response_mapper: ResponseMapper | None
    deprecated: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "handlers", MappingProxyType(dict(self.handlers)))

    def handler_for(self, operation: AssetOperation) -> OperationHandler:
        try:
            return self.handlers[operation]
        except KeyError:
            raise RegistryConfigurationError(
                f"API version {self.version} has no handler for '{operation.value}'"
            ) from None


@dataclass(frozen=True)
class VersionDescriptor:
    """Public description of a registered version (for docs and headers)."""

    version: ApiVersion
    deprecated: bool

    @property
    def group_name(self) -> str:
        return self.version.group_name


@dataclass(frozen=True)
class VersionRegistry:
    """Immutable ApiVersion -> RegistryEntry table.

    Construct through build(); the constructor does no validation.
    """

    _entries: Mapping[ApiVersion, RegistryEntry]
    operations: tuple[AssetOperation, ...] = field(default=tuple(AssetOperation))

    @classmethod
    def build(
        cls,
        entries: Iterable[RegistryEntry],
        operations: Iterable[AssetOperation] = tuple(AssetOperation),
        default_version: ApiVersion | None = None,
    ) -> "VersionRegistry":
        """
        Build and validate the registry.

        Args:
            entries: One entry per supported version
            operations: Operations every version must implement
            default_version: If given, must be one of the registered versions

        Raises:
            RegistryConfigurationError: Duplicate versions, a missing
                handler or mapper, or an unregistered default version
        """
        operations = tuple(operations)
        table: dict[ApiVersion, RegistryEntry] = {}

        for entry in entries:
            if entry.version in table:
                raise RegistryConfigurationError(
                    f"API version {entry.version} is registered more than once"
                )

            missing = [op.value for op in operations if op not in entry.handlers]
            if missing:
                raise RegistryConfigurationError(
                    f"API version {entry.version} is missing handlers for: {', '.join(missing)}"
                )

            if entry.response_mapper is None:
                raise RegistryConfigurationError(
                    f"API version {entry.version} has no response mapper"
                )
            if entry.request_mapper is None and any(op.has_body for op in operations):
                raise RegistryConfigurationError(
                    f"API version {entry.version} has no request mapper"
                )

            table[entry.version] = entry

        if not table:
            raise RegistryConfigurationError("At least one API version must be registered")

        if default_version is not None and default_version not in table:
            raise RegistryConfigurationError(
                f"Default API version {default_version} is not registered"
            )

        registry = cls(MappingProxyType(dict(sorted(table.items()))), operations)
        logger.info(
            f"Version registry built: supported={registry.supported_header()} "
            f"deprecated={registry.deprecated_header() or '-'}"
        )
        return registry

    def get(self, version: ApiVersion) -> RegistryEntry:
        return self._entries[version]

    def __contains__(self, version: object) -> bool:
        return version in self._entries

    def __iter__(self) -> Iterator[RegistryEntry]:
        return iter(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    @property
    def supported_versions(self) -> list[ApiVersion]:
        return list(self._entries)

    @property
    def deprecated_versions(self) -> list[ApiVersion]:
        return [entry.version for entry in self._entries.values() if entry.deprecated]

    def descriptors(self) -> list[VersionDescriptor]:
        return [VersionDescriptor(e.version, e.deprecated) for e in self._entries.values()]

    def descriptor_for_group(self, group_name: str) -> VersionDescriptor | None:
        for descriptor in self.descriptors():
            if descriptor.group_name == group_name:
                return descriptor
        return None

    def supported_header(self) -> str:
        """Value for the api-supported-versions header."""
        return ", ".join(str(v) for v in self.supported_versions)

    def deprecated_header(self) -> str:
        """Value for the api-deprecated-versions header ("" when none)."""
        return ", ".join(str(v) for v in self.deprecated_versions)
