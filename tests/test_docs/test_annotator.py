"""
Tests for deprecation annotations on generated documents.
"""

import copy

import pytest

from app.docs import DEPRECATION_NOTICE, OPERATION_DEPRECATION_NOTICE, DocumentAnnotator
from app.versioning import ApiVersion, VersionDescriptor


@pytest.fixture
def document() -> dict:
    return {
        "openapi": "3.1.0",
        "info": {"title": "Assets", "version": "0.0.0", "description": "Asset API version 1.0."},
        "paths": {
            "/api/v1/assets/{asset_id}": {
                "get": {"summary": "Get asset", "description": "Get an asset."},
                "patch": {"summary": "Update asset"},
                "parameters": [{"name": "asset_id", "in": "path"}],
            },
        },
    }


def operations(document: dict) -> list[dict]:
    return [op for item in document["paths"].values() for key, op in item.items() if key != "parameters"]


def test_deprecated_document_marked(document):
    annotated = DocumentAnnotator().annotate(document, VersionDescriptor(ApiVersion(1), deprecated=True))

    assert annotated["info"]["version"] == "1.0"
    assert annotated["info"]["description"].startswith("Asset API version 1.0.")
    assert annotated["info"]["description"].count(DEPRECATION_NOTICE) == 1
    for operation in operations(annotated):
        assert operation["deprecated"] is True
        assert operation["description"].count(OPERATION_DEPRECATION_NOTICE) == 1


def test_operation_without_description_gets_notice_only(document):
    annotated = DocumentAnnotator().annotate(document, VersionDescriptor(ApiVersion(1), deprecated=True))

    patch = annotated["paths"]["/api/v1/assets/{asset_id}"]["patch"]
    assert patch["description"] == OPERATION_DEPRECATION_NOTICE


def test_annotation_is_idempotent(document):
    annotator = DocumentAnnotator()
    descriptor = VersionDescriptor(ApiVersion(1), deprecated=True)

    once = annotator.annotate(document, descriptor)
    twice = annotator.annotate(once, descriptor)

    assert twice == once
    assert twice["info"]["description"].count(DEPRECATION_NOTICE) == 1
    for operation in operations(twice):
        assert operation["description"].count(OPERATION_DEPRECATION_NOTICE) == 1


def test_current_version_not_marked(document):
    annotated = DocumentAnnotator().annotate(document, VersionDescriptor(ApiVersion(2), deprecated=False))

    assert annotated["info"]["version"] == "2.0"
    assert DEPRECATION_NOTICE not in annotated["info"]["description"]
    for operation in operations(annotated):
        assert "deprecated" not in operation


def test_input_document_unchanged(document):
    original = copy.deepcopy(document)

    DocumentAnnotator().annotate(document, VersionDescriptor(ApiVersion(1), deprecated=True))

    assert document == original


def test_document_without_description(document):
    del document["info"]["description"]

    annotated = DocumentAnnotator().annotate(document, VersionDescriptor(ApiVersion(1), deprecated=True))

    assert annotated["info"]["description"] == DEPRECATION_NOTICE
