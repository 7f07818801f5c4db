"""
rest_parse.resources.users
───────────────────────────
Sign-up, log-in, session validation and social account linking.
"""
from __future__ import annotations

from typing import Any

from rest_parse.core.http import merge_submitted
from rest_parse.resources.base import Callback, Params, Resource


class Users(Resource):

    def sign_up(self, user: Params, callback: Callback | None = None):
        """Create a user. The returned body includes the submitted fields."""
        return self._call(
            "/users", callback, method="POST", params=user, merge=merge_submitted(user)
        )

    def log_in(self, username: str, password: str, callback: Callback | None = None):
        return self._call(
            "/login", callback, params={"username": username, "password": password}
        )

    def get(self, object_id: str, params: Params | None = None, callback: Callback | None = None):
        return self._call(f"/users/{object_id}", callback, params=params)

    def get_current(self, callback: Callback | None = None):
        """Fetch the user behind the session token; also validates the token."""
        return self._call("/users/me", callback)

    def update(self, object_id: str, data: Params, callback: Callback | None = None):
        return self._call(f"/users/{object_id}", callback, method="PUT", params=data)

    def delete(self, object_id: str, callback: Callback | None = None):
        return self._call(f"/users/{object_id}", callback, method="DELETE")

    def get_all(self, params: Params | None = None, callback: Callback | None = None):
        return self._call("/users", callback, params=params)

    def request_password_reset(self, email: str, callback: Callback | None = None):
        return self._call(
            "/requestPasswordReset", callback, method="POST", params={"email": email}
        )

    def log_in_social(self, auth_data: dict[str, Any], callback: Callback | None = None):
        """Sign up or log in with third-party auth data, e.g. {"facebook": {...}}."""
        return self._call(
            "/users", callback, method="POST", params={"authData": auth_data}
        )

    def link_with_social(
        self, object_id: str, auth_data: dict[str, Any], callback: Callback | None = None
    ):
        return self._call(
            f"/users/{object_id}", callback, method="PUT", params={"authData": auth_data}
        )

    def unlink_with_social(
        self, object_id: str, auth_data: dict[str, Any], callback: Callback | None = None
    ):
        """Unlink by sending the provider mapped to None, e.g. {"twitter": None}."""
        return self._call(
            f"/users/{object_id}", callback, method="PUT", params={"authData": auth_data}
        )
