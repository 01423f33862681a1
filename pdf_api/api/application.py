"""FastAPI application factory for the PDF processing service."""

from fastapi import FastAPI

from pdf_api.config import AppSettings

from .error_handlers import api_register_error_handlers
from .openapi import api_build_openapi_metadata
from .routers import api_create_greeting_router, api_create_pdf_processing_router


def create_api_application(settings: AppSettings) -> FastAPI:
    """Create the FastAPI application instance for the service.

    Args:
        settings: Validated application settings used for metadata and health reporting.

    Returns:
        FastAPI: Framework application with routes, documentation metadata and
        the global fault interceptor registered.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    application = FastAPI(**api_build_openapi_metadata(settings))
    api_register_error_handlers(application)
    application.include_router(api_create_greeting_router())
    application.include_router(api_create_pdf_processing_router(settings=settings))
    return application
