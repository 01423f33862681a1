"""Error taxonomy and fault-to-response translation."""

from .faults import (
    FAULT_FALLBACK_MESSAGES,
    FAULT_STATUS_CODES,
    ApiFault,
    FaultKind,
    InternalFault,
    InvalidArgumentFault,
    errors_classify_fault,
)
from .translator import (
    TranslatedFault,
    errors_build_payload,
    errors_extract_message,
    errors_format_timestamp,
    errors_translate_fault,
    errors_utc_now,
)

__all__ = [
    "FAULT_FALLBACK_MESSAGES",
    "FAULT_STATUS_CODES",
    "ApiFault",
    "FaultKind",
    "InternalFault",
    "InvalidArgumentFault",
    "TranslatedFault",
    "errors_build_payload",
    "errors_classify_fault",
    "errors_extract_message",
    "errors_format_timestamp",
    "errors_translate_fault",
    "errors_utc_now",
]
