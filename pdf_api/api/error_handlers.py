"""Global fault interception for the HTTP surface.

Every failed request is answered with the same error body. Stack traces
and exception causes are logged, never returned to clients.
"""

import logging
from http import HTTPStatus

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from pdf_api.domain import ErrorPayload
from pdf_api.errors import (
    FAULT_FALLBACK_MESSAGES,
    FAULT_STATUS_CODES,
    FaultKind,
    errors_build_payload,
    errors_translate_fault,
)

from .schemas import api_serialize_error_payload

logger = logging.getLogger(__name__)


def api_render_error(payload: ErrorPayload, headers: dict[str, str] | None = None) -> JSONResponse:
    """Render an error body with its own status code as transport status.

    Args:
        payload: Error body.
        headers: Optional extra response headers.

    Returns:
        JSONResponse: Response whose status equals `payload.status_code`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return JSONResponse(
        content=api_serialize_error_payload(payload),
        status_code=payload.status_code,
        headers=headers,
    )


def api_format_validation_errors(error: RequestValidationError) -> str:
    """Summarize request validation errors as one message line.

    Args:
        error: Framework validation error.

    Returns:
        str: `location: message` pairs joined by `; `, or the invalid-argument fallback.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    parts = []
    for detail in error.errors():
        location = ".".join(str(segment) for segment in detail.get("loc", ()))
        message = str(detail.get("msg", "")).strip()
        if location and message:
            parts.append(f"{location}: {message}")
        elif message:
            parts.append(message)
    return "; ".join(parts) or FAULT_FALLBACK_MESSAGES[FaultKind.INVALID_ARGUMENT]


def api_register_error_handlers(application: FastAPI) -> None:
    """Register the global fault interceptor and framework error handlers.

    Args:
        application: FastAPI application instance.

    Returns:
        None: Handlers are registered as a side effect.

    Raises:
        ValueError: Raised when application is None.
    """

    if application is None:
        raise ValueError("application must not be None")

    @application.middleware("http")
    async def api_intercept_unhandled_faults(request: Request, call_next):
        """Translate any fault escaping a route handler into an error response."""

        try:
            return await call_next(request)
        except Exception as fault:  # pylint: disable=broad-exception-caught
            translated = errors_translate_fault(fault, request_path=request.url.path)
            if translated.status_code >= 500:
                logger.exception(
                    "Unhandled %s fault on %s: %s",
                    translated.kind.value,
                    request.url.path,
                    type(fault).__name__,
                )
            else:
                logger.warning(
                    "Rejected request on %s: %s",
                    request.url.path,
                    translated.payload.message,
                )
            return api_render_error(translated.payload)

    @application.exception_handler(StarletteHTTPException)
    async def api_handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        """Keep framework HTTP errors in the shared error body."""

        if isinstance(exc.detail, str) and exc.detail.strip():
            message = exc.detail.strip()
        else:
            try:
                message = HTTPStatus(exc.status_code).phrase
            except ValueError:
                message = FAULT_FALLBACK_MESSAGES[FaultKind.UNCLASSIFIED]
        logger.warning("HTTP %d on %s: %s", exc.status_code, request.url.path, message)
        payload = errors_build_payload(exc.status_code, message, request.url.path)
        return api_render_error(payload, headers=getattr(exc, "headers", None))

    @application.exception_handler(RequestValidationError)
    async def api_handle_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
        """Answer request validation failures as invalid-argument faults."""

        message = api_format_validation_errors(exc)
        logger.warning("Invalid request on %s: %s", request.url.path, message)
        payload = errors_build_payload(
            FAULT_STATUS_CODES[FaultKind.INVALID_ARGUMENT],
            message,
            request.url.path,
        )
        return api_render_error(payload)
