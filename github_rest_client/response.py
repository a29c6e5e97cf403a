"""Response envelope and rate-limit parsing shared by every endpoint."""

import enum
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Generic, Mapping, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")

RATE_LIMIT_LIMIT_HEADER = "X-RateLimit-Limit"
RATE_LIMIT_REMAINING_HEADER = "X-RateLimit-Remaining"
RATE_LIMIT_RESET_HEADER = "X-RateLimit-Reset"


class ErrorKind(enum.Enum):
    """Why a call did not produce a payload."""

    TRANSPORT = "transport"  # no response received
    HTTP = "http"  # non-2xx response
    DECODE = "decode"  # 2xx response whose body did not match the payload type


class Presence(enum.Enum):
    """Outcome of a check endpoint that answers with 204 or 404."""

    PRESENT = "present"
    ABSENT = "absent"
    ERROR = "error"


@dataclass(frozen=True)
class RateLimit:
    """Rate-limit window reported by GitHub on every response."""

    limit: int
    remaining: int
    reset: datetime


@dataclass(frozen=True)
class ApiResponse(Generic[T]):
    """Result of a single GitHub REST API call.

    ``data`` is only set on success and ``error`` only on failure. Status 0
    means no usable response: see ``error_kind`` for the reason.
    """

    status: int
    data: T | None = None
    error: str | None = None
    rate_limit: RateLimit | None = None
    error_kind: ErrorKind | None = None

    @property
    def is_success(self) -> bool:
        return is_success_status(self.status)

    @property
    def presence(self) -> Presence:
        if self.is_success:
            return Presence.PRESENT
        if self.status == 404:
            return Presence.ABSENT
        return Presence.ERROR


def is_success_status(status: int) -> bool:
    return 200 <= status < 300


def parse_rate_limit(headers: Mapping[str, str]) -> RateLimit | None:
    """Build a RateLimit from response headers.

    All three headers must be present and integral; anything else yields None
    rather than an exception.
    """
    limit = headers.get(RATE_LIMIT_LIMIT_HEADER)
    remaining = headers.get(RATE_LIMIT_REMAINING_HEADER)
    reset = headers.get(RATE_LIMIT_RESET_HEADER)
    if limit is None or remaining is None or reset is None:
        return None
    try:
        return RateLimit(
            limit=int(limit),
            remaining=int(remaining),
            reset=datetime.fromtimestamp(int(reset), tz=timezone.utc),
        )
    except (ValueError, OverflowError, OSError):
        logger.debug("Ignoring malformed rate-limit headers: %s/%s/%s", limit, remaining, reset)
        return None
