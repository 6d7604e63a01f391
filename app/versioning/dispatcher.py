"""
Dispatcher - routes a resolved request through its version's table entry.

decode (request mapper) -> handler -> encode (response mapper).
Holds no per-request state; safe to share across concurrent requests.
"""

from typing import Any

from app.core.exceptions import DecodeValidationError
from app.domain import AssetId
from app.versioning.operations import AssetOperation
from app.versioning.registry import VersionRegistry
from app.versioning.version import ApiVersion


class Dispatcher:
    """Dispatches (version, operation) pairs using a VersionRegistry."""

    def __init__(self, registry: VersionRegistry):
        self.registry = registry

    async def dispatch(
        self,
        version: ApiVersion,
        operation: AssetOperation,
        asset_id: str,
        body: Any,
        service: Any,
    ) -> dict[str, Any]:
        """
        Run one operation for one resolved version.

        Args:
            version: Resolved API version (must be registered)
            operation: Operation to invoke
            asset_id: Asset identifier from the request path
            body: Parsed JSON request body, ignored for body-less operations
            service: Asset store collaborator passed through to the handler

        Returns:
            The version-shaped response body

        Raises:
            DecodeValidationError: The body or asset id violates the version's shape
            RegistryConfigurationError: The operation has no handler
        """
        entry = self.registry.get(version)
        handler = entry.handler_for(operation)

        try:
            identifier = AssetId(asset_id)
        except ValueError as e:
            raise DecodeValidationError(
                "Invalid asset ID",
                [{"field": "id", "message": str(e), "type": "value_error"}],
            ) from e

        changes = entry.request_mapper.decode(body) if operation.has_body else None
        asset = await handler(service, identifier, changes)
        return entry.response_mapper.encode(asset)
