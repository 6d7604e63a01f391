"""
API version readers.

Each reader inspects one attribute of the incoming request and either
returns a parsed ApiVersion or None ("no opinion"). A token that is
present but unparsable raises MalformedVersionError instead of being
treated as absent.
"""

import re
from collections.abc import Sequence
from typing import Protocol

from starlette.requests import Request

from app.versioning.version import ApiVersion

# Matches the "v{version}" segment of /api/v{version}/assets/{id}
DEFAULT_URL_SEGMENT_PATTERN = r"^/api/v(?P<version>[^/]+)(?:/|$)"


class VersionReader(Protocol):
    """Strategy that extracts an API version from a request."""

    def read(self, request: Request) -> ApiVersion | None:
        ...


class UrlSegmentVersionReader:
    """Reads the version from the ``v{version}`` path segment."""

    source = "url"

    def __init__(self, pattern: str = DEFAULT_URL_SEGMENT_PATTERN):
        self._pattern = re.compile(pattern)

    def read(self, request: Request) -> ApiVersion | None:
        match = self._pattern.match(request.url.path)
        if not match:
            return None
        return ApiVersion.parse(match["version"], source=self.source)


class HeaderVersionReader:
    """Reads the version from a request header (``x-api-version``)."""

    source = "header"

    def __init__(self, header_name: str = "x-api-version"):
        self.header_name = header_name

    def read(self, request: Request) -> ApiVersion | None:
        token = request.headers.get(self.header_name)
        if token is None or not token.strip():
            return None
        return ApiVersion.parse(token, source=f"{self.source}:{self.header_name}")


class VersionReaderChain:
    """
    Ordered list of readers; the first one with an opinion wins.

    Put the URL reader first so an explicit path segment takes
    precedence over the header.
    """

    def __init__(self, readers: Sequence[VersionReader]):
        self.readers = tuple(readers)

    def read(self, request: Request) -> ApiVersion | None:
        for reader in self.readers:
            version = reader.read(request)
            if version is not None:
                return version
        return None

    @classmethod
    def default(cls, header_name: str = "x-api-version") -> "VersionReaderChain":
        """URL segment first, then the version header."""
        return cls([UrlSegmentVersionReader(), HeaderVersionReader(header_name)])
