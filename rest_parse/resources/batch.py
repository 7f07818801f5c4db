"""
rest_parse.resources.batch
───────────────────────────
Builds POST /batch requests. Sub-request paths are absolute on the server,
so each relative path is prefixed with the path part of the base URL
("https://api.parse.com/1" + "/classes/X" → "/1/classes/X").
"""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import Any

import httpx

from rest_parse.core.http import ParseRequest


def base_path(base_url: str) -> str:
    return httpx.URL(base_url).path.rstrip("/")


def prefix_path(prefix: str, path: str) -> str:
    if not prefix or path == prefix or path.startswith(prefix + "/"):
        return path
    return prefix + path


def batch_request(
    base_url: str,
    requests: Sequence[Mapping[str, Any]],
    merge: Callable[[Any], Any] | None = None,
) -> ParseRequest:
    """Wrap sub-requests into a single ParseRequest against /batch."""
    prefix = base_path(base_url)
    sub_requests = []
    for sub in requests:
        entry = dict(sub)
        entry["path"] = prefix_path(prefix, entry["path"])
        if "method" in entry:
            entry["method"] = str(entry["method"]).upper()
        sub_requests.append(entry)
    return ParseRequest(
        path="/batch", method="POST", params={"requests": sub_requests}, merge=merge
    )
