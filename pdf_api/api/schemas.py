"""Response schemas published in the OpenAPI document.

Domain values are converted here so JSON field names stay stable regardless
of Python attribute names.
"""

from pydantic import BaseModel, ConfigDict, Field

from pdf_api.domain import ErrorPayload, HealthStatus, ServiceStatus


class ErrorResponse(BaseModel):
    """Error response containing error details and HTTP status information."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    status_code: int = Field(alias="statusCode", description="HTTP status code", examples=[400])
    message: str = Field(description="Error message describing the issue", examples=["Invalid request"])
    timestamp: str = Field(
        description="Timestamp of when the error occurred (ISO 8601 format)",
        examples=["2025-11-15T10:30:00.000Z"],
    )
    path: str | None = Field(
        default=None,
        description="API path that resulted in the error",
        examples=["/api/v1/pdf/health"],
    )


class HealthCheckResponse(BaseModel):
    """Health check response containing service status and version information."""

    model_config = ConfigDict(frozen=True)

    status: ServiceStatus = Field(description="Current health status of the service", examples=["UP"])
    service: str = Field(description="Name of the service", examples=["PDF Processing API"])
    version: str = Field(description="Current version of the API", examples=["1.0.0"])


def api_serialize_error_payload(payload: ErrorPayload) -> dict[str, object]:
    """Serialize one error body to its JSON shape.

    Args:
        payload: Domain error body.

    Returns:
        dict[str, object]: JSON-ready mapping with `statusCode`, `message`, `timestamp`, `path`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    response = ErrorResponse(
        status_code=payload.status_code,
        message=payload.message,
        timestamp=payload.timestamp,
        path=payload.path,
    )
    return response.model_dump(mode="json", by_alias=True)


def api_build_health_response(health_status: HealthStatus) -> HealthCheckResponse:
    """Convert a domain health report into its response schema."""

    return HealthCheckResponse(
        status=health_status.status,
        service=health_status.service,
        version=health_status.version,
    )
