"""Static service metadata for the generated OpenAPI document."""

from __future__ import annotations

from typing import Any, Final

from pdf_api.config import AppSettings

from .schemas import ErrorResponse

OPENAPI_DESCRIPTION: Final[str] = (
    "Application for PDF processing. Provides endpoints for uploading, processing, "
    "and retrieving PDF documents."
)

OPENAPI_CONTACT: Final[dict[str, str]] = {
    "name": "PDF Processing Team",
    "url": "https://example.com",
    "email": "support@example.com",
}

OPENAPI_LICENSE: Final[dict[str, str]] = {
    "name": "Apache License 2.0",
    "url": "https://www.apache.org/licenses/LICENSE-2.0.html",
}

TAG_PDF_PROCESSING: Final[str] = "PDF Processing"
TAG_HEALTH: Final[str] = "Health"
TAG_GREETING: Final[str] = "Greeting"

OPENAPI_TAGS: Final[list[dict[str, str]]] = [
    {"name": TAG_PDF_PROCESSING, "description": "Endpoints for PDF document processing"},
    {"name": TAG_HEALTH, "description": "Application health check endpoints"},
    {"name": TAG_GREETING, "description": "Endpoints for greeting operations"},
]

# Shared by every route: any unhandled fault ends as this body.
OPENAPI_ERROR_RESPONSES: Final[dict[int | str, dict[str, Any]]] = {
    500: {"model": ErrorResponse, "description": "Unhandled server-side fault"},
}


def api_build_openapi_metadata(settings: AppSettings) -> dict[str, Any]:
    """Build FastAPI constructor keyword arguments for documentation metadata.

    Args:
        settings: Validated application settings.

    Returns:
        dict[str, Any]: Title, version, description, contact, license, tags and docs URLs.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    docs_enabled = settings.docs_enabled
    return {
        "title": settings.service_name,
        "version": settings.service_version,
        "description": OPENAPI_DESCRIPTION,
        "contact": dict(OPENAPI_CONTACT),
        "license_info": dict(OPENAPI_LICENSE),
        "openapi_tags": [dict(tag) for tag in OPENAPI_TAGS],
        "docs_url": "/docs" if docs_enabled else None,
        "redoc_url": "/redoc" if docs_enabled else None,
        "openapi_url": "/openapi.json" if docs_enabled else None,
    }
