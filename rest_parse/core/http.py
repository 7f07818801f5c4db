"""
rest_parse.core.http
─────────────────────
HTTP primitives shared by both clients: status and header constants, the
request description handed to the dispatcher, the 4-tuple result, and the
response normalization rules.
"""
from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from typing import Any, NamedTuple

import httpx

from rest_parse.core.errors import ParseTransportError, api_error_for


# ── Constants ────────────────────────────────────────────────────────────────

class HTTP:
    """Status codes the client distinguishes."""

    OK = 200
    CREATED = 201

    UNAUTHORIZED = 401
    FORBIDDEN = 403
    NOT_FOUND = 404
    TOO_MANY_REQUESTS = 429


SUCCESS_STATUSES = frozenset({HTTP.OK, HTTP.CREATED})

APPLICATION_ID_HEADER = "X-Parse-Application-Id"
SESSION_TOKEN_HEADER = "X-Parse-Session-Token"
MASTER_KEY_HEADER = "X-Parse-Master-Key"
REST_API_KEY_HEADER = "X-Parse-REST-API-Key"


# ── Request / result ─────────────────────────────────────────────────────────

@dataclass(frozen=True)
class ParseRequest:
    """One call against the REST API, before auth headers are attached."""
    path: str
    method: str = "GET"
    params: Mapping[str, Any] | None = None
    body: bytes | None = None
    headers: Mapping[str, str] | None = None
    # Applied to the body of a successful response.
    merge: Callable[[Any], Any] | None = None


class ParseResult(NamedTuple):
    """(error, response, body, success) as handed to completion callbacks."""
    error: ParseTransportError | None
    response: httpx.Response | None
    body: Any
    success: bool

    def raise_for_error(self) -> ParseResult:
        """Raise the transport or status-mapped API error of a failed call."""
        if self.error is not None:
            raise self.error
        if not self.success:
            status = self.response.status_code if self.response is not None else 0
            raise api_error_for(status, self.body)
        return self


# ── Helpers ──────────────────────────────────────────────────────────────────

def stringify_param_values(params: Mapping[str, Any] | None) -> dict[str, Any] | None:
    """
    JSON-encode mapping and list values so they survive query-string encoding.

    Usage:
        stringify_param_values({"where": {"score": 3}, "limit": 10})
        # → {"where": '{"score":3}', "limit": 10}
    """
    if not params:
        return None
    return {
        key: json.dumps(value, separators=(",", ":"))
        if isinstance(value, (dict, list, tuple)) else value
        for key, value in params.items()
    }


def is_count_request(params: Mapping[str, Any] | None) -> bool:
    return bool(params) and bool(params.get("count"))


def merge_submitted(submitted: Mapping[str, Any]) -> Callable[[Any], Any]:
    """Fill in fields the server did not echo back from what was sent."""
    def merge(body: Any) -> Any:
        if isinstance(body, dict):
            return {**submitted, **body}
        return body
    return merge


def _decode_text(response: httpx.Response) -> str | bytes | None:
    """Text for decodable bodies, the raw bytes otherwise."""
    if not response.content:
        return None
    try:
        return response.content.decode(response.encoding or "utf-8")
    except (UnicodeDecodeError, LookupError):
        return response.content


def read_response(request: ParseRequest, response: httpx.Response) -> ParseResult:
    """Normalize a received response into a ParseResult."""
    success = response.status_code in SUCCESS_STATUSES
    content_type = response.headers.get("content-type", "")

    if "application/json" in content_type.lower():
        try:
            body = response.json()
        except ValueError as exc:
            error = ParseTransportError(
                user_message="Response body is not valid JSON.",
                detail=f"Invalid JSON from {request.method} {request.path}: {exc}",
                status=response.status_code,
            )
            return ParseResult(error, response, response.text, False)
        if isinstance(body, dict):
            if body.get("error"):
                success = False
            elif isinstance(body.get("results"), list) and not is_count_request(request.params):
                body = body["results"]
    else:
        body = _decode_text(response)

    if success and request.merge is not None:
        body = request.merge(body)
    return ParseResult(None, response, body, success)


def transport_failure(request: ParseRequest, exc: httpx.HTTPError) -> ParseResult:
    error = ParseTransportError(
        user_message="Could not reach the Parse API.",
        detail=f"{request.method} {request.path} failed: {exc}",
    )
    error.__cause__ = exc
    return ParseResult(error, None, None, False)


__all__ = [
    "HTTP", "ParseRequest", "ParseResult", "stringify_param_values",
    "is_count_request", "merge_submitted", "read_response", "transport_failure",
    "APPLICATION_ID_HEADER", "SESSION_TOKEN_HEADER", "MASTER_KEY_HEADER",
    "REST_API_KEY_HEADER",
]
