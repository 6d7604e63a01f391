"""
Custom exceptions for the Asset API.

Client errors derive from AssetAPIException and are rendered by the
global exception handler. RegistryConfigurationError is raised at
startup only and is never turned into a response.
"""

from typing import Any


class AssetAPIException(Exception):
    """Base exception for all Asset API client errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class MalformedVersionError(AssetAPIException):
    """400 - API version token present but unparsable."""

    def __init__(self, token: str, source: str | None = None):
        self.token = token
        self.source = source
        details: dict[str, Any] = {"token": token}
        if source:
            details["source"] = source
        super().__init__(
            error="malformed_api_version",
            message=f"API version '{token}' is not a valid version",
            status_code=400,
            details=details,
        )


class VersionRequiredError(AssetAPIException):
    """400 - No API version supplied and no default is permitted."""

    def __init__(self, message: str = "An API version is required but was not specified"):
        super().__init__(
            error="api_version_required",
            message=message,
            status_code=400,
        )


class UnsupportedVersionError(AssetAPIException):
    """400 - Well-formed API version that is not registered."""

    def __init__(self, version: str, supported_versions: list[str]):
        self.version = version
        self.supported_versions = supported_versions
        super().__init__(
            error="unsupported_api_version",
            message=f"API version '{version}' is not supported",
            status_code=400,
            details={"supportedVersions": supported_versions},
        )


class DecodeValidationError(AssetAPIException):
    """422 - Request body violates the version's DTO or domain invariants."""

    def __init__(self, message: str, fields: list[dict[str, Any]] | None = None):
        self.fields = fields or []
        super().__init__(
            error="validation_failed",
            message=message,
            status_code=422,
            details={"fields": self.fields} if self.fields else None,
        )


class AssetNotFoundException(AssetAPIException):
    """404 - Asset not found."""

    def __init__(self, asset_id: str):
        super().__init__(
            error="not_found",
            message=f"Asset with ID '{asset_id}' not found",
            status_code=404,
        )


class DocumentNotFoundException(AssetAPIException):
    """404 - No API document for the requested group."""

    def __init__(self, group: str):
        super().__init__(
            error="not_found",
            message=f"No API document named '{group}'",
            status_code=404,
        )


class RegistryConfigurationError(Exception):
    """
    Fatal startup error: the version registry is incomplete or inconsistent.

    Raised while building the registry so the application refuses to
    start instead of failing per request.
    """
