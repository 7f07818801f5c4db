"""
rest_parse.core.errors
───────────────────────
Error taxonomy for the Parse client. API failures are reported through
ParseResult, never raised by the dispatcher; these classes are what
ParseResult.raise_for_error() turns a failed call into.
"""
from __future__ import annotations

from typing import Any


# ── Base error ────────────────────────────────────────────────────────────────

class ParseError(Exception):
    """
    Base class for all client errors. Every error has:
    - code: stable machine-readable string, or the server's numeric code
    - user_message: safe to surface to end users
    - detail: internal context
    - status_code: HTTP status of the failed call (0 when none was received)
    """

    status_code: int = 0
    code: str | int = "parse_error"

    def __init__(
        self,
        code: str | int | None = None,
        user_message: str = "An unexpected error occurred.",
        detail: str | None = None,
        **metadata: Any,
    ) -> None:
        self.code = code if code is not None else self.__class__.code
        self.user_message = user_message
        self.detail = detail or user_message
        self.metadata = metadata
        super().__init__(self.detail)

    def to_dict(self) -> dict:
        return {
            "error": {
                "code": self.code,
                "message": self.user_message,
            }
        }


# ── Typed error classes ───────────────────────────────────────────────────────

class ConfigurationError(ParseError):
    """Client constructed without the settings it needs."""
    code = "configuration_error"


class ParseTransportError(ParseError):
    """The request never produced a usable response."""
    code = "transport_error"


class ParseApiError(ParseError):
    """The server answered, but not with success."""
    code = "api_error"

    def __init__(
        self,
        code: str | int | None = None,
        user_message: str = "Parse API request failed.",
        status_code: int = 0,
        **metadata: Any,
    ) -> None:
        if status_code:
            self.status_code = status_code
        super().__init__(code, user_message, **metadata)


class AuthError(ParseApiError):
    """Missing or invalid application keys or session token."""
    status_code = 401
    code = "auth_error"


class ForbiddenError(ParseApiError):
    """Keys are valid but the operation needs more privilege (e.g. master key)."""
    status_code = 403
    code = "forbidden"


class NotFoundError(ParseApiError):
    """Object, class or file does not exist."""
    status_code = 404
    code = "not_found"


class RateLimitError(ParseApiError):
    """Request limit exceeded."""
    status_code = 429
    code = "rate_limit_exceeded"


_BY_STATUS: dict[int, type[ParseApiError]] = {
    401: AuthError,
    403: ForbiddenError,
    404: NotFoundError,
    429: RateLimitError,
}


def api_error_for(status_code: int, body: Any) -> ParseApiError:
    """Build the status-mapped ParseApiError for a failed response body."""
    cls = _BY_STATUS.get(status_code, ParseApiError)
    code = None
    message = f"Parse API request failed with status {status_code}."
    if isinstance(body, dict):
        code = body.get("code")
        if body.get("error"):
            message = str(body["error"])
    return cls(code, message, status_code=status_code, body=body)


__all__ = [
    "ParseError", "ConfigurationError", "ParseTransportError", "ParseApiError",
    "AuthError", "ForbiddenError", "NotFoundError", "RateLimitError",
    "api_error_for",
]
