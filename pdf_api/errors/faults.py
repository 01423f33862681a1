"""Fault taxonomy and classification for request-handling failures."""

from __future__ import annotations

from enum import Enum
from typing import Final


class FaultKind(str, Enum):
    """Fault categories recognized by the error translator."""

    INVALID_ARGUMENT = "invalid_argument"
    INTERNAL = "internal"
    UNCLASSIFIED = "unclassified"


class ApiFault(Exception):
    """Base exception for project-raised request faults.

    Subclasses pin their category through `fault_kind`, which takes precedence
    over the builtin exception hierarchy during classification.
    """

    fault_kind: FaultKind = FaultKind.UNCLASSIFIED


class InvalidArgumentFault(ApiFault, ValueError):
    """Client-caused fault: the request carried an unusable argument."""

    fault_kind = FaultKind.INVALID_ARGUMENT


class InternalFault(ApiFault, RuntimeError):
    """Server-caused fault raised while handling a well-formed request."""

    fault_kind = FaultKind.INTERNAL


FAULT_INVALID_ARGUMENT_TYPES: Final[tuple[type[BaseException], ...]] = (ValueError,)

FAULT_INTERNAL_TYPES: Final[tuple[type[BaseException], ...]] = (
    RuntimeError,
    LookupError,
    ArithmeticError,
    TypeError,
    AttributeError,
)

FAULT_STATUS_CODES: Final[dict[FaultKind, int]] = {
    FaultKind.INVALID_ARGUMENT: 400,
    FaultKind.INTERNAL: 500,
    FaultKind.UNCLASSIFIED: 500,
}

FAULT_FALLBACK_MESSAGES: Final[dict[FaultKind, str]] = {
    FaultKind.INVALID_ARGUMENT: "Invalid argument provided",
    FaultKind.INTERNAL: "An internal server error occurred",
    FaultKind.UNCLASSIFIED: "An unexpected error occurred",
}


def errors_classify_fault(fault: BaseException) -> FaultKind:
    """Resolve the fault category, most specific first.

    Args:
        fault: Raised exception.

    Returns:
        FaultKind: Category driving status code and fallback message.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    if isinstance(fault, ApiFault):
        return fault.fault_kind
    if isinstance(fault, FAULT_INVALID_ARGUMENT_TYPES):
        return FaultKind.INVALID_ARGUMENT
    if isinstance(fault, FAULT_INTERNAL_TYPES):
        return FaultKind.INTERNAL
    return FaultKind.UNCLASSIFIED
