"""API router package for endpoint composition."""

from .greeting import api_create_greeting_router
from .pdf_processing import api_create_pdf_processing_router

__all__ = ["api_create_greeting_router", "api_create_pdf_processing_router"]
