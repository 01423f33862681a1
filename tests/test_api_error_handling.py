"""Tests for the global fault interceptor on the HTTP surface.

Routes that raise are mounted on the real application so every fault takes
the same path as production handler faults.
"""

from __future__ import annotations

import logging
from datetime import datetime

from fastapi import FastAPI, Query
from fastapi.testclient import TestClient

from pdf_api.api.application import create_api_application
from pdf_api.config import AppSettings
from pdf_api.errors import InternalFault, InvalidArgumentFault


class _UnclassifiedFault(Exception):
    """Fault type outside every recognized category."""


def _build_settings() -> AppSettings:
    """Create test settings object.

    Returns:
        AppSettings: Deterministic test settings for API creation.

    Raises:
        ValueError: Raised by AppSettings when values are invalid.
    """

    return AppSettings(environment_name="test")


def _build_application() -> FastAPI:
    """Create the service application with extra fault-raising routes.

    Returns:
        FastAPI: Application under test.

    Raises:
        ValueError: Raised when application factory dependencies are invalid.
    """

    application = create_api_application(_build_settings())

    @application.get("/faults/invalid-argument")
    def fault_invalid_argument() -> str:
        raise ValueError("bad size")

    @application.get("/faults/invalid-argument-empty")
    def fault_invalid_argument_empty() -> str:
        raise InvalidArgumentFault()

    @application.get("/faults/internal")
    def fault_internal() -> str:
        raise InternalFault("pdf renderer crashed")

    @application.get("/faults/internal-empty")
    def fault_internal_empty() -> str:
        raise RuntimeError()

    @application.get("/faults/unclassified")
    def fault_unclassified() -> str:
        raise _UnclassifiedFault()

    @application.get("/faults/async")
    async def fault_async() -> str:
        raise LookupError("page 7 not found")

    @application.get("/faults/validated")
    def fault_validated(size: int = Query(ge=1)) -> int:
        return size

    return application


def _assert_error_body(body: dict[str, object], status_code: int, message: str, path: str) -> None:
    """Assert the shared error body shape and values.

    Args:
        body: Decoded JSON response body.
        status_code: Expected `statusCode`.
        message: Expected `message`.
        path: Expected `path`.

    Returns:
        None: Assertions validate body shape.

    Raises:
        AssertionError: Raised when body shape or values differ.
    """

    assert set(body) == {"statusCode", "message", "timestamp", "path"}
    assert body["statusCode"] == status_code
    assert body["message"] == message
    assert body["path"] == path
    parsed = datetime.fromisoformat(str(body["timestamp"]).replace("Z", "+00:00"))
    assert parsed.tzinfo is not None


def test_api_error_invalid_argument_fault_returns_bad_request_with_message() -> None:
    """Return HTTP 400 with the fault message for invalid-argument faults.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(_build_application())

    response = client.get("/faults/invalid-argument")

    assert response.status_code == 400
    _assert_error_body(response.json(), 400, "bad size", "/faults/invalid-argument")


def test_api_error_invalid_argument_without_message_uses_fallback() -> None:
    """Return HTTP 400 with fallback message when the fault carries none.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(_build_application())

    response = client.get("/faults/invalid-argument-empty")

    assert response.status_code == 400
    _assert_error_body(response.json(), 400, "Invalid argument provided", "/faults/invalid-argument-empty")


def test_api_error_internal_faults_return_server_error() -> None:
    """Return HTTP 500 for recognized runtime faults with and without messages.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(_build_application())

    with_message = client.get("/faults/internal")
    without_message = client.get("/faults/internal-empty")

    assert with_message.status_code == 500
    _assert_error_body(with_message.json(), 500, "pdf renderer crashed", "/faults/internal")
    assert without_message.status_code == 500
    _assert_error_body(without_message.json(), 500, "An internal server error occurred", "/faults/internal-empty")


def test_api_error_unclassified_fault_without_message_uses_unexpected_fallback() -> None:
    """Return HTTP 500 and the catch-all fallback for unclassified faults.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(_build_application())

    response = client.get("/faults/unclassified")

    assert response.status_code == 500
    _assert_error_body(response.json(), 500, "An unexpected error occurred", "/faults/unclassified")


def test_api_error_async_handler_fault_is_translated() -> None:
    """Translate faults raised from coroutine handlers the same way.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(_build_application())

    response = client.get("/faults/async?trace=1")

    assert response.status_code == 500
    _assert_error_body(response.json(), 500, "page 7 not found", "/faults/async")


def test_api_error_body_never_contains_traceback(caplog) -> None:
    """Keep traceback details in logs and out of the response body.

    Args:
        caplog: Pytest log capture fixture.

    Returns:
        None: Assertions validate response and log behavior.

    Raises:
        AssertionError: Raised when internals leak or the fault is not logged.
    """

    client = TestClient(_build_application())

    with caplog.at_level(logging.WARNING, logger="pdf_api.api.error_handlers"):
        response = client.get("/faults/internal")

    assert "Traceback" not in response.text
    assert "InternalFault" not in response.text
    error_records = [record for record in caplog.records if record.levelno == logging.ERROR]
    assert error_records
    assert error_records[-1].exc_info is not None


def test_api_error_unknown_route_returns_not_found_error_body() -> None:
    """Return HTTP 404 in the shared error body for unknown routes.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(_build_application())

    response = client.get("/api/v1/pdf/missing")

    assert response.status_code == 404
    _assert_error_body(response.json(), 404, "Not Found", "/api/v1/pdf/missing")


def test_api_error_wrong_method_keeps_allow_header() -> None:
    """Return HTTP 405 in the shared error body with the Allow header preserved.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(_build_application())

    response = client.post("/api/greeting")

    assert response.status_code == 405
    _assert_error_body(response.json(), 405, "Method Not Allowed", "/api/greeting")
    assert "GET" in response.headers["allow"]


def test_api_error_request_validation_returns_bad_request() -> None:
    """Answer request validation failures as invalid-argument faults.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response does not match expected payload.
    """

    client = TestClient(_build_application())

    response = client.get("/faults/validated?size=0")

    assert response.status_code == 400
    body = response.json()
    assert body["statusCode"] == 400
    assert body["path"] == "/faults/validated"
    assert body["message"].startswith("query.size: ")


def test_api_error_successful_route_is_untouched_by_interceptor() -> None:
    """Pass successful responses through the interceptor unchanged.

    Returns:
        None: Assertions validate response behavior.

    Raises:
        AssertionError: Raised when response is altered.
    """

    client = TestClient(_build_application())

    response = client.get("/faults/validated?size=3")

    assert response.status_code == 200
    assert response.json() == 3
