"""
API versioning: version resolution, the version registry and dispatch.
"""

from app.versioning.dispatcher import Dispatcher
from app.versioning.operations import AssetOperation
from app.versioning.readers import (
    HeaderVersionReader,
    UrlSegmentVersionReader,
    VersionReader,
    VersionReaderChain,
)
from app.versioning.registry import (
    RegistryEntry,
    RequestMapper,
    ResponseMapper,
    VersionDescriptor,
    VersionRegistry,
)
from app.versioning.resolver import VersionResolver, resolve_version
from app.versioning.version import ApiVersion

__all__ = [
    "ApiVersion",
    "AssetOperation",
    "Dispatcher",
    "HeaderVersionReader",
    "RegistryEntry",
    "RequestMapper",
    "ResponseMapper",
    "UrlSegmentVersionReader",
    "VersionDescriptor",
    "VersionReader",
    "VersionReaderChain",
    "VersionRegistry",
    "VersionResolver",
    "resolve_version",
]
