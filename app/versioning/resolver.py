"""
Version resolution.

Order of precedence: an explicit signal from the reader chain, then the
configured default (only if assuming it is allowed), then failure.
Versions that are well-formed but not registered are rejected rather
than silently replaced by the default.
"""

import logging
from typing import Protocol

from starlette.requests import Request

from app.core.exceptions import UnsupportedVersionError, VersionRequiredError
from app.versioning.readers import VersionReaderChain
from app.versioning.version import ApiVersion

logger = logging.getLogger(__name__)


class SupportedVersions(Protocol):
    """What the resolver needs from the registry."""

    def __contains__(self, version: object) -> bool:
        ...

    @property
    def supported_versions(self) -> list[ApiVersion]:
        ...


def resolve_version(
    request: Request,
    chain: VersionReaderChain,
    default_version: ApiVersion,
    assume_default_when_unspecified: bool,
    supported: SupportedVersions,
) -> ApiVersion:
    """
    Determine the API version governing ``request``.

    Raises:
        MalformedVersionError: A version token is present but unparsable
        VersionRequiredError: No version signal and no default permitted
        UnsupportedVersionError: The version is not registered
    """
    version = chain.read(request)

    if version is None:
        if not assume_default_when_unspecified:
            logger.debug(f"No API version on {request.url.path} and no default allowed")
            raise VersionRequiredError()
        version = default_version

    if version not in supported:
        logger.debug(f"Rejected unsupported API version {version} on {request.url.path}")
        raise UnsupportedVersionError(
            str(version),
            [str(v) for v in supported.supported_versions],
        )

    return version


class VersionResolver:
    """Binds resolve_version to a fixed chain, default, policy and registry."""

    def __init__(
        self,
        chain: VersionReaderChain,
        supported: SupportedVersions,
        default_version: ApiVersion,
        assume_default_when_unspecified: bool = True,
    ):
        self.chain = chain
        self.supported = supported
        self.default_version = default_version
        self.assume_default_when_unspecified = assume_default_when_unspecified

    def resolve(self, request: Request) -> ApiVersion:
        return resolve_version(
            request,
            self.chain,
            self.default_version,
            self.assume_default_when_unspecified,
            self.supported,
        )
