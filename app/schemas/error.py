"""
Pydantic schemas for error responses.
"""

from typing import Any

from pydantic import BaseModel, Field, ValidationError


class ErrorResponse(BaseModel):
    """
    Standard error response format.

    Examples:
        400: {"error": "unsupported_api_version", "message": "...", "details": {"supportedVersions": [...]}}
        404: {"error": "not_found", "message": "Asset with ID '42' not found"}
        422: {"error": "validation_failed", "message": "...", "details": {"fields": [...]}}
    """

    error: str = Field(
        ...,
        description="Error code string",
        examples=["validation_failed", "unsupported_api_version", "not_found"],
    )
    message: str = Field(
        ...,
        description="Human-readable error message",
    )
    details: dict[str, Any] | None = Field(
        default=None,
        description="Optional additional error details",
    )


class FieldError(BaseModel):
    """One field-scoped validation failure."""

    field: str
    message: str
    type: str


def field_errors(exc: ValidationError) -> list[dict[str, Any]]:
    """Flatten a pydantic ValidationError into wire-named field errors."""
    errors = []
    for err in exc.errors():
        loc = ".".join(str(part) for part in err["loc"]) or "body"
        errors.append(
            FieldError(field=loc, message=err["msg"], type=err["type"]).model_dump()
        )
    return errors
