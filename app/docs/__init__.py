"""Per-version OpenAPI documents and their deprecation annotations."""

from app.docs.annotator import (
    DEPRECATION_NOTICE,
    OPERATION_DEPRECATION_NOTICE,
    DocumentAnnotator,
)
from app.docs.openapi import build_version_documents, generate_version_document

__all__ = [
    "DEPRECATION_NOTICE",
    "OPERATION_DEPRECATION_NOTICE",
    "DocumentAnnotator",
    "build_version_documents",
    "generate_version_document",
]
