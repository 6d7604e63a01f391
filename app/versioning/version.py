"""API version value type."""

import re
from dataclasses import dataclass

from app.core.exceptions import MalformedVersionError

_VERSION_PATTERN = re.compile(r"^(?P<major>\d+)(?:\.(?P<minor>\d+))?$")


@dataclass(frozen=True, order=True)
class ApiVersion:
    """A supported API version, e.g. ``1.0`` or ``2.0``.

    Attributes:
        major: Major version number
        minor: Minor version number (defaults to 0)

    Example:
        >>> ApiVersion.parse("2")
        ApiVersion(major=2, minor=0)
        >>> str(ApiVersion(1))
        '1.0'
        >>> ApiVersion(1).group_name
        'v1'
    """

    major: int
    minor: int = 0

    def __post_init__(self) -> None:
        if self.major < 0 or self.minor < 0:
            raise ValueError("API version numbers must be non-negative")

    @classmethod
    def parse(cls, token: str, source: str | None = None) -> "ApiVersion":
        """
        Parse a version token such as ``"1"`` or ``"1.0"``.

        Args:
            token: Raw token from the URL segment or header
            source: Where the token came from, reported on failure

        Raises:
            MalformedVersionError: If the token is not a version number
        """
        match = _VERSION_PATTERN.match(token.strip())
        if not match:
            raise MalformedVersionError(token, source=source)
        return cls(int(match["major"]), int(match["minor"] or 0))

    @property
    def group_name(self) -> str:
        """Documentation group name ("v1", "v2.1")."""
        if self.minor:
            return f"v{self.major}.{self.minor}"
        return f"v{self.major}"

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}"
