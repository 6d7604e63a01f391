"""
Response utilities for the Asset API.
Provides standardized error formatting and API version reporting.
"""

from typing import Any

from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from app.versioning import VersionRegistry

API_PATH_PREFIX = "/api"
SUPPORTED_VERSIONS_HEADER = "api-supported-versions"
DEPRECATED_VERSIONS_HEADER = "api-deprecated-versions"


def create_error_response(
    error: str,
    message: str,
    status_code: int,
    details: dict[str, Any] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """
    Create a standardized error response.

    Args:
        error: Error code string
        message: Human-readable error message
        status_code: HTTP status code
        details: Optional additional error details
        headers: Optional response headers

    Returns:
        JSONResponse with error payload
    """
    content = {
        "error": error,
        "message": message,
    }
    if details:
        content["details"] = details

    return JSONResponse(status_code=status_code, content=content, headers=headers)


def version_report_headers(registry: VersionRegistry) -> dict[str, str]:
    """Headers enumerating supported and deprecated API versions."""
    headers = {SUPPORTED_VERSIONS_HEADER: registry.supported_header()}
    deprecated = registry.deprecated_header()
    if deprecated:
        headers[DEPRECATED_VERSIONS_HEADER] = deprecated
    return headers


class ApiVersionReportingMiddleware(BaseHTTPMiddleware):
    """Adds api-supported-versions / api-deprecated-versions to /api responses."""

    def __init__(self, app, path_prefix: str = API_PATH_PREFIX) -> None:
        super().__init__(app)
        self.path_prefix = path_prefix

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        response = await call_next(request)
        if request.url.path.startswith(self.path_prefix):
            registry = request.app.state.versioning.registry
            response.headers.update(version_report_headers(registry))
        return response
