"""PDF processing router composition.

Only the health endpoint exists; document processing endpoints are not
implemented.
"""

from fastapi import APIRouter

from pdf_api.config import AppSettings
from pdf_api.domain import domain_build_health_status

from ..openapi import OPENAPI_ERROR_RESPONSES, TAG_PDF_PROCESSING
from ..schemas import HealthCheckResponse, api_build_health_response


def api_create_pdf_processing_router(settings: AppSettings) -> APIRouter:
    """Create PDF processing router with the service health endpoint.

    Args:
        settings: Runtime settings providing service name and version.

    Returns:
        APIRouter: Router exposing `/api/v1/pdf/health` endpoint.

    Raises:
        ValueError: Raised when settings is None.
    """

    if settings is None:
        raise ValueError("settings must not be None")

    router = APIRouter(prefix="/api/v1/pdf", tags=[TAG_PDF_PROCESSING], responses=OPENAPI_ERROR_RESPONSES)

    @router.get(
        "/health",
        summary="Check API health status",
        response_model=HealthCheckResponse,
        responses={
            200: {"description": "API is healthy and operational"},
            # Published for client compatibility; no check reports DOWN yet.
            503: {"model": HealthCheckResponse, "description": "API is unavailable"},
        },
    )
    def api_pdf_health_status() -> HealthCheckResponse:
        """Return service health, name and version.

        Returns:
            HealthCheckResponse: Health payload with `UP` status.

        Raises:
            RuntimeError: This handler does not raise runtime errors.
        """

        health_status = domain_build_health_status(
            service=settings.service_name,
            version=settings.service_version,
        )
        return api_build_health_response(health_status)

    return router
