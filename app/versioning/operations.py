"""Operations every API version must implement."""

import enum


class AssetOperation(str, enum.Enum):
    """Closed set of asset operations.

    Add an operation here and every registered version must implement
    it before the registry will build.
    """

    GET = "get"
    UPDATE = "update"

    @property
    def http_method(self) -> str:
        return _HTTP_METHODS[self]

    @property
    def has_body(self) -> bool:
        return self is AssetOperation.UPDATE


_HTTP_METHODS = {
    AssetOperation.GET: "GET",
    AssetOperation.UPDATE: "PATCH",
}
