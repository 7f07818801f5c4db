"""
rest_parse.resources.objects
─────────────────────────────
Objects of one class: CRUD, counting, atomic increments and batched
create/update/delete.
"""
from __future__ import annotations

from collections.abc import Callable, Mapping, Sequence
from typing import TYPE_CHECKING, Any

from rest_parse.core.http import merge_submitted
from rest_parse.resources.base import Callback, Params, Resource
from rest_parse.resources.batch import batch_request

if TYPE_CHECKING:
    from rest_parse.client import _BaseClient


def _merge_created(objects: Sequence[Params]):
    """Fold each submitted object into its batch "success" entry."""
    def merge(body: Any) -> Any:
        if not isinstance(body, list):
            return body
        merged = []
        for index, item in enumerate(body):
            if (
                index < len(objects)
                and isinstance(item, dict)
                and isinstance(item.get("success"), dict)
            ):
                item = {**item, "success": {**objects[index], **item["success"]}}
            merged.append(item)
        return merged
    return merge


class Objects(Resource):

    def __init__(self, client: _BaseClient, class_name: str) -> None:
        super().__init__(client)
        self.class_name = class_name

    @property
    def path(self) -> str:
        return f"/classes/{self.class_name}"

    def create(self, data: Params, callback: Callback | None = None):
        return self._call(
            self.path, callback, method="POST", params=data, merge=merge_submitted(data)
        )

    def get(self, object_id: str, params: Params | None = None, callback: Callback | None = None):
        return self._call(f"{self.path}/{object_id}", callback, params=params)

    def update(self, object_id: str, data: Params, callback: Callback | None = None):
        return self._call(f"{self.path}/{object_id}", callback, method="PUT", params=data)

    def delete(self, object_id: str, callback: Callback | None = None):
        return self._call(f"{self.path}/{object_id}", callback, method="DELETE")

    def get_all(self, params: Params | None = None, callback: Callback | None = None):
        return self._call(self.path, callback, params=params)

    def count(self, params: Params | None = None, callback: Callback | None = None):
        """Count matching objects; the body keeps its {"count": n, "results": []} shape."""
        query = {**(params or {}), "count": 1, "limit": 0}
        return self._call(self.path, callback, params=query)

    def update_counter(
        self, object_id: str, field: str, amount: int, callback: Callback | None = None
    ):
        """Atomically add `amount` (may be negative) to a numeric field."""
        return self._call(
            f"{self.path}/{object_id}",
            callback,
            method="PUT",
            params={field: {"__op": "Increment", "amount": amount}},
        )

    # ── Batch ─────────────────────────────────────────────────────────────────

    def create_many(self, objects: Sequence[Params], callback: Callback | None = None):
        requests = [
            {"method": "POST", "path": self.path, "body": dict(obj)} for obj in objects
        ]
        return self._batch(requests, callback, merge=_merge_created(list(objects)))

    def update_many(self, updates: Sequence[Mapping[str, Any]], callback: Callback | None = None):
        """Each update is {"objectId": ..., "data": {...}}."""
        requests = [
            {
                "method": "PUT",
                "path": f"{self.path}/{update['objectId']}",
                "body": dict(update["data"]),
            }
            for update in updates
        ]
        return self._batch(requests, callback)

    def delete_many(self, deletes: Sequence[Mapping[str, Any]], callback: Callback | None = None):
        """Each delete is {"objectId": ...}."""
        requests = [
            {"method": "DELETE", "path": f"{self.path}/{delete['objectId']}"}
            for delete in deletes
        ]
        return self._batch(requests, callback)

    def _batch(
        self,
        requests: list[dict[str, Any]],
        callback: Callback | None,
        merge: Callable[[Any], Any] | None = None,
    ):
        return self._client.dispatch(
            batch_request(self._client.base_url, requests, merge), callback
        )
