"""Domain models used across application layer boundaries."""

from .models import (
    GREETING_MESSAGE,
    ErrorPayload,
    GreetingPayload,
    HealthStatus,
    ServiceStatus,
    domain_build_health_status,
)

__all__ = [
    "GREETING_MESSAGE",
    "ErrorPayload",
    "GreetingPayload",
    "HealthStatus",
    "ServiceStatus",
    "domain_build_health_status",
]
