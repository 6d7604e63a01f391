"""
Per-version OpenAPI document generation.

The runtime asset routes are version-agnostic (the version is resolved
per request), so they are hidden from FastAPI's own schema. Instead, one
document per registered version is generated here from that version's
DTO models, with the version substituted into the route templates:

    /api/v{version}/assets/{asset_id}  ->  /api/v1/assets/{asset_id}

The default version's document also lists the unversioned alias
/api/assets/{asset_id}. Every document is passed through the
DocumentAnnotator before being served.
"""

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from fastapi import APIRouter, Body, Header
from fastapi.openapi.utils import get_openapi

from app.core.exceptions import RegistryConfigurationError
from app.docs.annotator import DocumentAnnotator
from app.schemas.error import ErrorResponse
from app.versioning.operations import AssetOperation
from app.versioning.registry import RegistryEntry, VersionRegistry
from app.versioning.version import ApiVersion

ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Malformed, missing or unsupported API version"},
    404: {"model": ErrorResponse, "description": "Asset not found"},
}
UPDATE_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    **ERROR_RESPONSES,
    422: {"model": ErrorResponse, "description": "Request body failed validation"},
}


def _get_endpoint(entry: RegistryEntry, header_name: str | None):
    if header_name:
        async def get_asset(
            asset_id: str,
            api_version: str | None = Header(default=None, alias=header_name),
        ):
            """Get an asset."""
    else:
        async def get_asset(asset_id: str):
            """Get an asset."""
    return get_asset


def _update_endpoint(entry: RegistryEntry, header_name: str | None):
    request_model = entry.request_mapper.model

    if header_name:
        async def update_asset(
            asset_id: str,
            body: request_model = Body(...),  # type: ignore[valid-type]
            api_version: str | None = Header(default=None, alias=header_name),
        ):
            """Update an asset's status, notes and value."""
    else:
        async def update_asset(
            asset_id: str,
            body: request_model = Body(...),  # type: ignore[valid-type]
        ):
            """Update an asset's status, notes and value."""
    return update_asset


@dataclass(frozen=True)
class OperationDoc:
    """How one operation appears in a version document."""

    summary: str
    endpoint: Callable[[RegistryEntry, str | None], Callable[..., Any]]
    responses: dict[int | str, dict[str, Any]]


# Every AssetOperation must have an entry here
OPERATION_DOCS: dict[AssetOperation, OperationDoc] = {
    AssetOperation.GET: OperationDoc(
        summary="Get asset",
        endpoint=_get_endpoint,
        responses=ERROR_RESPONSES,
    ),
    AssetOperation.UPDATE: OperationDoc(
        summary="Update asset",
        endpoint=_update_endpoint,
        responses=UPDATE_ERROR_RESPONSES,
    ),
}


def _add_operations(
    router: APIRouter,
    entry: RegistryEntry,
    operations: tuple[AssetOperation, ...],
    path: str,
    operation_suffix: str,
    header_name: str | None,
) -> None:
    for operation in operations:
        doc = OPERATION_DOCS.get(operation)
        if doc is None:
            raise RegistryConfigurationError(
                f"No documentation is declared for operation '{operation.value}'"
            )
        endpoint = doc.endpoint(entry, header_name)

        router.add_api_route(
            path=path,
            endpoint=endpoint,
            methods=[operation.http_method],
            response_model=entry.response_mapper.model,
            tags=["assets"],
            summary=doc.summary,
            operation_id=f"{operation.value}_asset_{operation_suffix}",
            responses=doc.responses,
        )


def generate_version_document(
    entry: RegistryEntry,
    operations: tuple[AssetOperation, ...],
    title: str,
    include_unversioned_alias: bool = False,
    header_name: str = "x-api-version",
) -> dict[str, Any]:
    """
    Generate the raw OpenAPI document for one version.

    Args:
        entry: Registry entry for the version
        operations: Operations to document
        title: Document title
        include_unversioned_alias: Also document /api/assets/{asset_id}
        header_name: Version header accepted on the unversioned alias

    Returns:
        OpenAPI document (not yet annotated)
    """
    group = entry.version.group_name
    router = APIRouter()
    _add_operations(
        router,
        entry,
        operations,
        path=f"/api/{group}/assets/{{asset_id}}",
        operation_suffix=group.replace(".", "_"),
        header_name=None,
    )
    if include_unversioned_alias:
        _add_operations(
            router,
            entry,
            operations,
            path="/api/assets/{asset_id}",
            operation_suffix="unversioned",
            header_name=header_name,
        )

    return get_openapi(
        title=title,
        version=str(entry.version),
        description=f"Asset API version {entry.version}.",
        routes=router.routes,
    )


def build_version_documents(
    registry: VersionRegistry,
    title: str,
    default_version: ApiVersion | None = None,
    header_name: str = "x-api-version",
    annotator: DocumentAnnotator | None = None,
) -> dict[str, dict[str, Any]]:
    """
    Generate and annotate one document per registered version.

    Returns:
        Mapping of group name ("v1", "v2") to annotated document
    """
    annotator = annotator or DocumentAnnotator()
    documents = {}
    for descriptor in registry.descriptors():
        entry = registry.get(descriptor.version)
        document = generate_version_document(
            entry,
            registry.operations,
            title=title,
            include_unversioned_alias=descriptor.version == default_version,
            header_name=header_name,
        )
        documents[descriptor.group_name] = annotator.annotate(document, descriptor)
    return documents
