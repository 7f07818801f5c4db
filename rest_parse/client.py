"""
rest_parse.client
──────────────────
Sync and async clients for the Parse REST API. Both share configuration,
header construction and request encoding; they differ only in the httpx
client they drive and in whether dispatch() returns the result or an
awaitable of it.

Usage::

    parse = RestParse(app_id="...", rest_api_key="...")
    result = parse.objects("GameScore").create({"score": 1337})
    if result.success:
        print(result.body["objectId"])

    async with AsyncRestParse.from_settings() as parse:
        error, response, body, success = await parse.users().get_current()
"""
from __future__ import annotations

import inspect
from abc import ABC, abstractmethod
from collections.abc import Callable, Mapping, Sequence
from typing import Any, TypeVar

import httpx

from rest_parse.core.config import DEFAULT_BASE_URL, ParseSettings, get_settings
from rest_parse.core.errors import ConfigurationError
from rest_parse.core.http import (
    APPLICATION_ID_HEADER,
    MASTER_KEY_HEADER,
    REST_API_KEY_HEADER,
    SESSION_TOKEN_HEADER,
    ParseRequest,
    ParseResult,
    read_response,
    stringify_param_values,
    transport_failure,
)
from rest_parse.core.logging import get_logger
from rest_parse.resources.analytics import Analytics
from rest_parse.resources.batch import batch_request
from rest_parse.resources.files import Files
from rest_parse.resources.objects import Objects
from rest_parse.resources.push import Push
from rest_parse.resources.roles import Roles
from rest_parse.resources.users import Users

log = get_logger(__name__)

Callback = Callable[..., Any]
C = TypeVar("C", bound="_BaseClient")


class _BaseClient(ABC):
    """Configuration and request encoding common to both clients."""

    def __init__(
        self,
        app_id: str | None,
        *,
        rest_api_key: str | None = None,
        master_key: str | None = None,
        session_token: str | None = None,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 30.0,
    ) -> None:
        if not app_id:
            raise ConfigurationError(
                user_message="A Parse application id is required.",
                detail="app_id is empty; set PARSE_APP_ID or pass app_id=",
            )
        self.app_id = app_id
        self.rest_api_key = rest_api_key
        self.master_key = master_key
        self.session_token = session_token
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @classmethod
    def from_settings(cls: type[C], settings: ParseSettings | None = None, **kwargs: Any) -> C:
        """Build a client from ParseSettings (env/.env by default)."""
        settings = settings or get_settings()

        def secret(value: Any) -> str | None:
            return value.get_secret_value() if value is not None else None

        options: dict[str, Any] = {
            "rest_api_key": secret(settings.rest_api_key),
            "master_key": secret(settings.master_key),
            "session_token": secret(settings.session_token),
            "base_url": settings.base_url,
            "timeout": settings.timeout,
        }
        options.update(kwargs)
        return cls(options.pop("app_id", settings.app_id), **options)

    # ── Resources ─────────────────────────────────────────────────────────────

    def users(self) -> Users:
        return Users(self)

    def objects(self, class_name: str) -> Objects:
        return Objects(self, class_name)

    def roles(self) -> Roles:
        return Roles(self)

    def files(self) -> Files:
        return Files(self)

    def analytics(self) -> Analytics:
        return Analytics(self)

    def push(self) -> Push:
        return Push(self)

    def batch(self, requests: Sequence[Mapping[str, Any]], callback: Callback | None = None):
        """Relay sub-requests ({"method", "path", "body"}) to the batch endpoint."""
        return self.dispatch(batch_request(self.base_url, requests), callback)

    # ── Request encoding ──────────────────────────────────────────────────────

    def auth_headers(self) -> dict[str, str]:
        headers = {APPLICATION_ID_HEADER: self.app_id}
        if self.session_token:
            headers[SESSION_TOKEN_HEADER] = self.session_token
        if self.master_key:
            headers[MASTER_KEY_HEADER] = self.master_key
        if self.rest_api_key:
            headers[REST_API_KEY_HEADER] = self.rest_api_key
        return headers

    def url_for(self, path: str) -> str:
        return self.base_url + path

    def request_options(self, request: ParseRequest) -> dict[str, Any]:
        """Keyword arguments for httpx's request() describing this call."""
        headers = self.auth_headers()
        if request.headers:
            headers.update(request.headers)
        options: dict[str, Any] = {"headers": headers}

        if request.params is not None:
            if request.method.upper() == "GET":
                options["params"] = stringify_param_values(request.params)
            else:
                options["json"] = dict(request.params)
        elif request.body is not None:
            options["content"] = request.body
        return options

    @abstractmethod
    def dispatch(self, request: ParseRequest, callback: Callback | None = None) -> Any:
        """Send one request; returns a ParseResult or an awaitable of one."""


class RestParse(_BaseClient):
    """Blocking client; every call returns a ParseResult."""

    def __init__(
        self,
        app_id: str | None,
        *,
        transport: httpx.BaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(app_id, **kwargs)
        self._http = httpx.Client(timeout=self.timeout, transport=transport)

    def dispatch(self, request: ParseRequest, callback: Callback | None = None) -> ParseResult:
        log.debug("parse.request", method=request.method, path=request.path)
        try:
            response = self._http.request(
                request.method, self.url_for(request.path), **self.request_options(request)
            )
        except httpx.HTTPError as exc:
            log.warning("parse.transport_error", method=request.method, path=request.path, error=str(exc))
            result = transport_failure(request, exc)
        else:
            result = read_response(request, response)
            log.debug("parse.response", path=request.path, status=response.status_code, success=result.success)

        if callback is not None:
            callback(*result)
        return result

    def close(self) -> None:
        self._http.close()

    def __enter__(self) -> RestParse:
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()


class AsyncRestParse(_BaseClient):
    """Asyncio client; every call returns an awaitable of a ParseResult."""

    def __init__(
        self,
        app_id: str | None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(app_id, **kwargs)
        self._http = httpx.AsyncClient(timeout=self.timeout, transport=transport)

    async def dispatch(self, request: ParseRequest, callback: Callback | None = None) -> ParseResult:
        log.debug("parse.request", method=request.method, path=request.path)
        try:
            response = await self._http.request(
                request.method, self.url_for(request.path), **self.request_options(request)
            )
        except httpx.HTTPError as exc:
            log.warning("parse.transport_error", method=request.method, path=request.path, error=str(exc))
            result = transport_failure(request, exc)
        else:
            result = read_response(request, response)
            log.debug("parse.response", path=request.path, status=response.status_code, success=result.success)

        if callback is not None:
            outcome = callback(*result)
            if inspect.isawaitable(outcome):
                await outcome
        return result

    async def aclose(self) -> None:
        await self._http.aclose()

    async def __aenter__(self) -> AsyncRestParse:
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()


__all__ = ["RestParse", "AsyncRestParse"]
