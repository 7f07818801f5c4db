"""rest_parse.resources.roles — CRUD on /roles."""
from __future__ import annotations

from rest_parse.core.http import merge_submitted
from rest_parse.resources.base import Callback, Params, Resource


class Roles(Resource):

    def create(self, data: Params, callback: Callback | None = None):
        return self._call(
            "/roles", callback, method="POST", params=data, merge=merge_submitted(data)
        )

    def get(self, object_id: str, params: Params | None = None, callback: Callback | None = None):
        return self._call(f"/roles/{object_id}", callback, params=params)

    def update(self, object_id: str, data: Params, callback: Callback | None = None):
        return self._call(f"/roles/{object_id}", callback, method="PUT", params=data)

    def delete(self, object_id: str, callback: Callback | None = None):
        return self._call(f"/roles/{object_id}", callback, method="DELETE")

    def get_all(self, params: Params | None = None, callback: Callback | None = None):
        return self._call("/roles", callback, params=params)
