"""
Tests for per-version OpenAPI document generation.
"""

import pytest

from app.api import v2
from app.api.registry import VERSION_ENTRIES
from app.docs import DEPRECATION_NOTICE, OPERATION_DEPRECATION_NOTICE, build_version_documents
from app.docs.openapi import OPERATION_DOCS, generate_version_document
from app.versioning import ApiVersion, AssetOperation, VersionRegistry


@pytest.fixture
def documents() -> dict:
    registry = VersionRegistry.build(VERSION_ENTRIES, default_version=ApiVersion(2))
    return build_version_documents(registry, title="Assets", default_version=ApiVersion(2))


def all_operations(document: dict) -> list[dict]:
    return [
        operation
        for path_item in document["paths"].values()
        for method, operation in path_item.items()
        if method in {"get", "patch"}
    ]


def test_one_document_per_version(documents):
    assert set(documents) == {"v1", "v2"}
    assert documents["v1"]["info"]["version"] == "1.0"
    assert documents["v2"]["info"]["version"] == "2.0"


def test_version_substituted_into_paths(documents):
    assert set(documents["v1"]["paths"]) == {"/api/v1/assets/{asset_id}"}
    assert set(documents["v1"]["paths"]["/api/v1/assets/{asset_id}"]) == {"get", "patch"}


def test_default_version_documents_unversioned_alias(documents):
    assert set(documents["v2"]["paths"]) == {
        "/api/v2/assets/{asset_id}",
        "/api/assets/{asset_id}",
    }
    alias_get = documents["v2"]["paths"]["/api/assets/{asset_id}"]["get"]
    assert "x-api-version" in [p["name"] for p in alias_get["parameters"]]


def test_deprecated_version_document(documents):
    v1 = documents["v1"]

    assert v1["info"]["description"].count(DEPRECATION_NOTICE) == 1
    operations = all_operations(v1)
    assert operations
    for operation in operations:
        assert operation["deprecated"] is True
        assert operation["description"].count(OPERATION_DEPRECATION_NOTICE) == 1


def test_current_version_document_not_deprecated(documents):
    v2 = documents["v2"]

    assert DEPRECATION_NOTICE not in v2["info"]["description"]
    for operation in all_operations(v2):
        assert not operation.get("deprecated", False)


def test_schemas_follow_version_shapes(documents):
    v1_schemas = documents["v1"]["components"]["schemas"]
    v2_schemas = documents["v2"]["components"]["schemas"]

    assert set(v1_schemas["V1AssetResponse"]["properties"]) == {"id", "status", "notes", "value"}
    assert set(v2_schemas["V2AssetResponse"]["properties"]) == {
        "assetId",
        "status",
        "notes",
        "totalValue",
        "retiredOn",
    }
    assert "V2AssetResponse" not in v1_schemas
    assert "V1AssetResponse" not in v2_schemas


def test_every_operation_has_documentation():
    assert set(OPERATION_DOCS) == set(AssetOperation)


def test_operation_summaries_and_responses(documents):
    path_item = documents["v2"]["paths"]["/api/v2/assets/{asset_id}"]

    assert path_item["get"]["summary"] == "Get asset"
    assert path_item["patch"]["summary"] == "Update asset"
    assert path_item["patch"]["responses"]["422"]["description"] == "Request body failed validation"
    assert path_item["get"]["responses"]["404"]["description"] == "Asset not found"


def test_documents_only_requested_operations():
    document = generate_version_document(v2.ENTRY, (AssetOperation.GET,), title="Assets")

    assert set(document["paths"]["/api/v2/assets/{asset_id}"]) == {"get"}
