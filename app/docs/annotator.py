"""
Deprecation annotations for generated OpenAPI documents.

For a deprecated version the document description gets a notice, and
every operation is flagged ``deprecated`` with its own notice. Notices
are only appended when not already present, so annotating twice yields
the same document.
"""

import copy
from typing import Any

from app.versioning.registry import VersionDescriptor

DEPRECATION_NOTICE = (
    "**Deprecated**: This API version is deprecated. Please migrate to the latest version."
)
OPERATION_DEPRECATION_NOTICE = "**Deprecated**: Use latest version instead."

# OpenAPI path item keys that hold operations
HTTP_METHODS = frozenset({"get", "put", "post", "delete", "options", "head", "patch", "trace"})


def _append_notice(text: str | None, notice: str) -> str:
    if not text:
        return notice
    if notice in text:
        return text
    return f"{text}\n\n{notice}"


class DocumentAnnotator:
    """Applies version metadata to a generated OpenAPI document."""

    def annotate(self, document: dict[str, Any], descriptor: VersionDescriptor) -> dict[str, Any]:
        """
        Return an annotated copy of ``document``.

        Args:
            document: OpenAPI document generated for one version
            descriptor: The version the document describes

        Returns:
            A new document; the input is left unchanged
        """
        annotated = copy.deepcopy(document)
        info = annotated.setdefault("info", {})
        info["version"] = str(descriptor.version)

        if not descriptor.deprecated:
            return annotated

        info["description"] = _append_notice(info.get("description"), DEPRECATION_NOTICE)

        for path_item in annotated.get("paths", {}).values():
            for method, operation in path_item.items():
                if method not in HTTP_METHODS:
                    continue
                operation["deprecated"] = True
                operation["description"] = _append_notice(
                    operation.get("description"), OPERATION_DEPRECATION_NOTICE
                )

        return annotated
