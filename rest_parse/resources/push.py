"""
rest_parse.resources.push
──────────────────────────
Push notifications. Delivery happens server-side; this is a single POST.
"""
from __future__ import annotations

from rest_parse.core.http import merge_submitted
from rest_parse.resources.base import Callback, Params, Resource


class Push(Resource):

    def send_notification(self, data: Params, callback: Callback | None = None):
        """
        Queue a notification.

        Usage:
            parse.push().send_notification({
                "channels": ["giants"],
                "data": {"alert": "The Giants won!"},
            })
        """
        return self._call(
            "/push", callback, method="POST", params=data, merge=merge_submitted(data)
        )
