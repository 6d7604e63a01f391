"""
Version registration - the single place that lists supported versions.

To add a version, create app/api/vN/ with its mappers and ENTRY and
append it to VERSION_ENTRIES. Existing versions are not touched.
"""

import logging
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from app.api import v1, v2
from app.config import Settings
from app.core.exceptions import MalformedVersionError, RegistryConfigurationError
from app.docs import build_version_documents
from app.versioning import (
    ApiVersion,
    Dispatcher,
    RegistryEntry,
    VersionReaderChain,
    VersionRegistry,
    VersionResolver,
)

logger = logging.getLogger(__name__)

VERSION_ENTRIES: list[RegistryEntry] = [
    v1.ENTRY,
    v2.ENTRY,
]


@dataclass(frozen=True)
class ApiVersioning:
    """Startup-built, read-only versioning state shared by all requests."""

    registry: VersionRegistry
    resolver: VersionResolver
    dispatcher: Dispatcher
    documents: Mapping[str, dict[str, Any]]


def build_versioning(
    settings: Settings,
    entries: list[RegistryEntry] | None = None,
) -> ApiVersioning:
    """
    Build the registry, resolver, dispatcher and per-version documents.

    Raises:
        RegistryConfigurationError: The registry or default version is
            misconfigured; the application must not start
    """
    try:
        default_version = ApiVersion.parse(settings.DEFAULT_API_VERSION)
    except MalformedVersionError as e:
        raise RegistryConfigurationError(
            f"DEFAULT_API_VERSION '{settings.DEFAULT_API_VERSION}' is not a valid version"
        ) from e

    registry = VersionRegistry.build(
        VERSION_ENTRIES if entries is None else entries,
        default_version=default_version,
    )
    resolver = VersionResolver(
        chain=VersionReaderChain.default(settings.API_VERSION_HEADER),
        supported=registry,
        default_version=default_version,
        assume_default_when_unspecified=settings.ASSUME_DEFAULT_VERSION_WHEN_UNSPECIFIED,
    )
    documents = build_version_documents(
        registry,
        title=settings.PROJECT_NAME,
        default_version=default_version,
        header_name=settings.API_VERSION_HEADER,
    )
    logger.info(f"API documents generated: {', '.join(documents)}")

    return ApiVersioning(
        registry=registry,
        resolver=resolver,
        dispatcher=Dispatcher(registry),
        documents=documents,
    )
