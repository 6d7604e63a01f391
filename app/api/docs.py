"""
Per-version OpenAPI documents, e.g. /openapi/v1.json.
"""

from fastapi import APIRouter
from fastapi.responses import JSONResponse

from app.core.exceptions import DocumentNotFoundException
from app.dependencies import Versioning

router = APIRouter()


@router.get("/openapi/{group}.json", include_in_schema=False)
async def get_version_document(group: str, versioning: Versioning):
    """Serve the annotated OpenAPI document for one API version group."""
    descriptor = versioning.registry.descriptor_for_group(group)
    if descriptor is None:
        raise DocumentNotFoundException(group)
    return JSONResponse(content=versioning.documents[descriptor.group_name])
