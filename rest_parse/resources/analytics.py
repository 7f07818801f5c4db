"""rest_parse.resources.analytics — custom analytics events."""
from __future__ import annotations

from rest_parse.resources.base import Callback, Params, Resource


class Analytics(Resource):

    def send_event(
        self, event_name: str, dimensions: Params | None = None, callback: Callback | None = None
    ):
        """Record `event_name`, optionally segmented by string dimensions."""
        return self._call(
            f"/events/{event_name}", callback, method="POST", params=dimensions or {}
        )
