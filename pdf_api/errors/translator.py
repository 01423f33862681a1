"""Fault-to-response translation used by the global fault interceptor.

The translator is the last recovery point for a failed request, so none of
the functions in this module may raise.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime, timezone

from pdf_api.domain import ErrorPayload

from .faults import FAULT_FALLBACK_MESSAGES, FAULT_STATUS_CODES, FaultKind, errors_classify_fault

Clock = Callable[[], datetime]


@dataclass(frozen=True)
class TranslatedFault:
    """Translation result for one failed request.

    Attributes:
        kind: Resolved fault category.
        status_code: Transport status code for the response.
        payload: Error body whose status code matches `status_code`.
    """

    kind: FaultKind
    status_code: int
    payload: ErrorPayload


def errors_utc_now() -> datetime:
    """Return the current timezone-aware UTC instant."""

    return datetime.now(timezone.utc)


def errors_format_timestamp(instant: datetime) -> str:
    """Render an instant as ISO-8601 UTC with millisecond precision and `Z` suffix.

    Args:
        instant: Instant to render; naive values are treated as UTC.

    Returns:
        str: Timestamp such as `2025-11-15T10:30:00.123Z`.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if instant.tzinfo is None:
        instant = instant.replace(tzinfo=timezone.utc)
    rendered = instant.astimezone(timezone.utc).isoformat(timespec="milliseconds")
    return rendered.replace("+00:00", "Z")


def errors_extract_message(fault: BaseException, fallback_message: str) -> str:
    """Return the fault's own message, or the fallback when it has none.

    Args:
        fault: Raised exception.
        fallback_message: Category fallback message.

    Returns:
        str: Non-empty message text.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    try:
        message = str(fault).strip()
    except Exception:  # pylint: disable=broad-exception-caught
        return fallback_message
    return message or fallback_message


def errors_build_payload(
    status_code: int,
    message: str,
    request_path: str | None,
    clock: Clock = errors_utc_now,
) -> ErrorPayload:
    """Build an error body stamped with the translation instant.

    Args:
        status_code: HTTP status code.
        message: Client-facing message.
        request_path: Failing request path, when known.
        clock: Source of the current instant.

    Returns:
        ErrorPayload: Immutable error body.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return ErrorPayload(
        status_code=status_code,
        message=message,
        timestamp=errors_format_timestamp(clock()),
        path=request_path,
    )


def errors_translate_fault(
    fault: BaseException,
    request_path: str | None = None,
    clock: Clock = errors_utc_now,
) -> TranslatedFault:
    """Translate one raised fault into an error body and transport status.

    Args:
        fault: Exception that escaped request handling.
        request_path: Failing request path, when known.
        clock: Source of the current instant.

    Returns:
        TranslatedFault: Category, status code and error body.

    Raises:
        RuntimeError: This function does not raise runtime errors.
    """

    kind = errors_classify_fault(fault)
    status_code = FAULT_STATUS_CODES[kind]
    message = errors_extract_message(fault, FAULT_FALLBACK_MESSAGES[kind])
    return TranslatedFault(
        kind=kind,
        status_code=status_code,
        payload=errors_build_payload(status_code, message, request_path, clock=clock),
    )
