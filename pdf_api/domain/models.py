"""Typed value objects shared across runtime layers.

Every value here is created per request and discarded with the response.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Final

GREETING_MESSAGE: Final[str] = "Hare Krishna"


class ServiceStatus(str, Enum):
    """Reported service status.

    `DOWN` is part of the published health contract but no check produces it yet.
    """

    UP = "UP"
    DOWN = "DOWN"


@dataclass(frozen=True)
class ErrorPayload:
    """Client-facing error body produced for every failed request.

    Attributes:
        status_code: HTTP status code, equal to the transport status.
        message: Non-empty human-readable message.
        timestamp: ISO-8601 UTC instant of translation.
        path: Request URL path that failed, when known.
    """

    status_code: int
    message: str
    timestamp: str
    path: str | None = None


@dataclass(frozen=True)
class HealthStatus:
    """Health response contract used by health-check surfaces.

    Attributes:
        status: Overall service status.
        service: Service name.
        version: Service version.
    """

    status: ServiceStatus
    service: str
    version: str


@dataclass(frozen=True)
class GreetingPayload:
    """Greeting response contract.

    Attributes:
        message: Greeting text.
    """

    message: str = GREETING_MESSAGE


def domain_build_health_status(service: str, version: str) -> HealthStatus:
    """Build the health report for the running service.

    Args:
        service: Service name.
        version: Service version.

    Returns:
        HealthStatus: Always reports `UP`; no dependency checks are performed.

    Raises:
        RuntimeError: This helper does not raise runtime errors.
    """

    return HealthStatus(status=ServiceStatus.UP, service=service, version=version)
