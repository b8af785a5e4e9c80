"""Errors raised by the Drive binding and the GData builder.

Every failure of a Drive call reaches the caller exactly once as one of
these classes; `map_http_error` decides which one from the HTTP status.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional


class GDriveConnectError(Exception):
    """
    Root of every error this package raises.

    `details` carries what a caller needs to decide what to do next:
    `status_code`, `reason` and `domain` from the Drive error body, plus
    `operation` and `file_id` for the call that failed. `cause` is the
    transport or client exception that was mapped, if any.
    """

    def __init__(
        self,
        message: str,
        *,
        details: Optional[dict[str, Any]] = None,
        cause: Optional[BaseException] = None,
    ) -> None:
        super().__init__(message)
        self.details = details or {}
        self.cause = cause

    @property
    def status_code(self) -> Optional[int]:
        """HTTP status of the failed call, if the failure came from Drive."""
        value = self.details.get("status_code")
        return value if isinstance(value, int) else None


class InvalidStateError(GDriveConnectError):
    """An ElementBuilder was used after handing its element over, or added to itself."""


class AuthError(GDriveConnectError):
    """Credentials could not be loaded, refreshed or authorized; also HTTP 401."""


class PermissionError(GDriveConnectError):
    """The token lacks the scope, or the user lacks access to the file (HTTP 403)."""


class InvalidArgumentError(GDriveConnectError):
    """Drive rejected the request: bad ID, malformed query, expired page token (HTTP 400)."""


class NotFoundError(GDriveConnectError):
    """No file or permission with that ID, including one deleted earlier (HTTP 404)."""


class ConflictError(GDriveConnectError):
    """The file changed underneath the request (HTTP 409/412)."""


class RateLimitError(GDriveConnectError):
    """Too many requests (HTTP 429). Not retried here."""


class QuotaExceededError(GDriveConnectError):
    """Daily, per-user or storage quota used up (HTTP 403 with a quota reason)."""


class NetworkError(GDriveConnectError):
    """The request never completed: socket, timeout or stream read failure."""


class ApiError(GDriveConnectError):
    """Anything else: 5xx, unexpected 4xx, or an unrecognized client failure."""


@dataclass(frozen=True)
class HttpErrorInfo:
    """Status, reason and message pulled out of a failed Drive response."""

    status_code: int
    reason: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


_STATUS_ERRORS: dict[int, type[GDriveConnectError]] = {
    400: InvalidArgumentError,
    401: AuthError,
    403: PermissionError,
    404: NotFoundError,
    409: ConflictError,
    412: ConflictError,
    429: RateLimitError,
}

_QUOTA_REASON_KEYWORDS: tuple[str, ...] = (
    "quota",
    "rateLimitExceeded",
    "userRateLimitExceeded",
    "dailyLimitExceeded",
    "usageLimits",
    "storageQuotaExceeded",
)


def _is_quota_reason(reason: str | None) -> bool:
    if not reason:
        return False
    return any(key.lower() in reason.lower() for key in _QUOTA_REASON_KEYWORDS)


def map_http_error(
    info: HttpErrorInfo,
    *,
    cause: Optional[BaseException] = None,
) -> GDriveConnectError:
    """
    Pick the exception class for a failed Drive response.

    Status codes:
        - 400 -> InvalidArgumentError
        - 401 -> AuthError
        - 403 -> PermissionError, but QuotaExceededError if quota-related
        - 404 -> NotFoundError
        - 409/412 -> ConflictError
        - 429 -> RateLimitError
        - otherwise -> ApiError
    """
    details: dict[str, Any] = {
        "status_code": info.status_code,
        "reason": info.reason,
    }
    if info.details:
        details.update(info.details)

    message = info.message or f"HTTP error {info.status_code}"

    error_cls = _STATUS_ERRORS.get(info.status_code, ApiError)
    if error_cls is PermissionError and _is_quota_reason(info.reason):
        error_cls = QuotaExceededError
    return error_cls(message, details=details, cause=cause)
