"""
Tests for the version readers and the reader chain.
"""

import pytest

from app.core.exceptions import MalformedVersionError
from app.versioning import (
    ApiVersion,
    HeaderVersionReader,
    UrlSegmentVersionReader,
    VersionReaderChain,
)


def test_url_reader_reads_segment(make_request):
    reader = UrlSegmentVersionReader()

    assert reader.read(make_request("/api/v1/assets/42")) == ApiVersion(1)
    assert reader.read(make_request("/api/v2.0/assets/42")) == ApiVersion(2)


def test_url_reader_no_opinion_without_segment(make_request):
    """Test that the unversioned alias yields no opinion."""
    reader = UrlSegmentVersionReader()

    assert reader.read(make_request("/api/assets/42")) is None
    assert reader.read(make_request("/health")) is None


def test_url_reader_malformed_segment(make_request):
    with pytest.raises(MalformedVersionError):
        UrlSegmentVersionReader().read(make_request("/api/vX/assets/42"))


def test_header_reader(make_request):
    reader = HeaderVersionReader("x-api-version")

    assert reader.read(make_request("/api/assets/42", {"x-api-version": "2"})) == ApiVersion(2)
    assert reader.read(make_request("/api/assets/42", {"X-Api-Version": "1.0"})) == ApiVersion(1)


def test_header_reader_absent_or_blank(make_request):
    reader = HeaderVersionReader("x-api-version")

    assert reader.read(make_request("/api/assets/42")) is None
    assert reader.read(make_request("/api/assets/42", {"x-api-version": "  "})) is None


def test_header_reader_malformed(make_request):
    with pytest.raises(MalformedVersionError) as exc_info:
        HeaderVersionReader("x-api-version").read(
            make_request("/api/assets/42", {"x-api-version": "latest"})
        )

    assert exc_info.value.details["source"] == "header:x-api-version"


def test_chain_url_takes_precedence_over_header(make_request):
    """Test that the URL segment wins even when the header disagrees."""
    chain = VersionReaderChain.default()
    request = make_request("/api/v1/assets/42", {"x-api-version": "2"})

    assert chain.read(request) == ApiVersion(1)


def test_chain_falls_back_to_header(make_request):
    chain = VersionReaderChain.default()

    assert chain.read(make_request("/api/assets/42", {"x-api-version": "1"})) == ApiVersion(1)


def test_chain_no_opinion(make_request):
    assert VersionReaderChain.default().read(make_request("/api/assets/42")) is None


def test_chain_malformed_url_is_not_skipped(make_request):
    """Test that a malformed URL token fails even with a valid header."""
    chain = VersionReaderChain.default()

    with pytest.raises(MalformedVersionError):
        chain.read(make_request("/api/vX/assets/42", {"x-api-version": "2"}))


def test_chain_respects_configured_order(make_request):
    chain = VersionReaderChain([HeaderVersionReader("x-api-version"), UrlSegmentVersionReader()])

    assert chain.read(make_request("/api/v1/assets/42", {"x-api-version": "2"})) == ApiVersion(2)


def test_chain_custom_header_name(make_request):
    chain = VersionReaderChain.default("api-version")

    assert chain.read(make_request("/api/assets/42", {"api-version": "1"})) == ApiVersion(1)
    assert chain.read(make_request("/api/assets/42", {"x-api-version": "1"})) is None
