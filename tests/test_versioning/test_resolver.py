"""
Tests for version resolution.
"""

import pytest

from app.api.v1 import ENTRY as V1_ENTRY
from app.api.v2 import ENTRY as V2_ENTRY
from app.core.exceptions import (
    MalformedVersionError,
    UnsupportedVersionError,
    VersionRequiredError,
)
from app.versioning import (
    ApiVersion,
    VersionReaderChain,
    VersionRegistry,
    VersionResolver,
    resolve_version,
)


@pytest.fixture
def registry() -> VersionRegistry:
    return VersionRegistry.build([V1_ENTRY, V2_ENTRY], default_version=ApiVersion(2))


def make_resolver(registry: VersionRegistry, assume_default: bool = True) -> VersionResolver:
    return VersionResolver(
        chain=VersionReaderChain.default(),
        supported=registry,
        default_version=ApiVersion(2),
        assume_default_when_unspecified=assume_default,
    )


def test_url_segment_wins_over_header(registry, make_request):
    resolver = make_resolver(registry)
    request = make_request("/api/v1/assets/42", {"x-api-version": "2"})

    assert resolver.resolve(request) == ApiVersion(1)


def test_header_used_without_url_segment(registry, make_request):
    resolver = make_resolver(registry)

    assert resolver.resolve(make_request("/api/assets/42", {"x-api-version": "1"})) == ApiVersion(1)


def test_default_when_unspecified(registry, make_request):
    resolver = make_resolver(registry, assume_default=True)

    assert resolver.resolve(make_request("/api/assets/42")) == ApiVersion(2)


def test_version_required_when_default_not_assumed(registry, make_request):
    resolver = make_resolver(registry, assume_default=False)

    with pytest.raises(VersionRequiredError):
        resolver.resolve(make_request("/api/assets/42"))


@pytest.mark.parametrize("assume_default", [True, False])
def test_malformed_never_falls_back(registry, make_request, assume_default: bool):
    resolver = make_resolver(registry, assume_default=assume_default)

    with pytest.raises(MalformedVersionError):
        resolver.resolve(make_request("/api/vX/assets/42"))

    with pytest.raises(MalformedVersionError):
        resolver.resolve(make_request("/api/assets/42", {"x-api-version": "two"}))


def test_unsupported_version_lists_supported(registry, make_request):
    resolver = make_resolver(registry)

    with pytest.raises(UnsupportedVersionError) as exc_info:
        resolver.resolve(make_request("/api/v3/assets/42"))

    assert exc_info.value.version == "3.0"
    assert exc_info.value.details["supportedVersions"] == ["1.0", "2.0"]


def test_unsupported_version_from_header(registry, make_request):
    resolver = make_resolver(registry)

    with pytest.raises(UnsupportedVersionError):
        resolver.resolve(make_request("/api/assets/42", {"x-api-version": "9"}))


def test_resolve_version_function(registry, make_request):
    version = resolve_version(
        make_request("/api/assets/42"),
        VersionReaderChain.default(),
        ApiVersion(1),
        True,
        registry,
    )

    assert version == ApiVersion(1)
