"""
rest_parse.resources.base
──────────────────────────
Shared plumbing for resource classes. A resource never talks HTTP itself:
it describes the call as a ParseRequest and hands it to the owning client,
so the same class serves the sync and the async client.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any

from rest_parse.core.http import ParseRequest

if TYPE_CHECKING:
    from rest_parse.client import _BaseClient

Callback = Callable[..., Any]
Params = Mapping[str, Any]


class Resource:
    def __init__(self, client: _BaseClient) -> None:
        self._client = client

    def _call(self, path: str, callback: Callback | None = None, **kwargs: Any):
        return self._client.dispatch(ParseRequest(path=path, **kwargs), callback)
