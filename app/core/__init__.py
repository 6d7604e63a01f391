"""Core utilities and exceptions for the Asset API."""

from app.core.exceptions import (
    AssetAPIException,
    AssetNotFoundException,
    DecodeValidationError,
    DocumentNotFoundException,
    MalformedVersionError,
    RegistryConfigurationError,
    UnsupportedVersionError,
    VersionRequiredError,
)

__all__ = [
    "AssetAPIException",
    "AssetNotFoundException",
    "DecodeValidationError",
    "DocumentNotFoundException",
    "MalformedVersionError",
    "RegistryConfigurationError",
    "UnsupportedVersionError",
    "VersionRequiredError",
]
