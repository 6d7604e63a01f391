"""
Versioned Asset API

Exposes a single asset resource through several concurrently supported
API versions, with per-version request/response mapping and
deprecation-annotated OpenAPI documents.
"""

__version__ = "1.0.0"
