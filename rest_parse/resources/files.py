"""
rest_parse.resources.files
───────────────────────────
File uploads and deletion. Uploads send the raw bytes with their own
Content-Type instead of a JSON body.
"""
from __future__ import annotations

import mimetypes
from pathlib import Path

from rest_parse.resources.base import Callback, Resource

DEFAULT_CONTENT_TYPE = "application/octet-stream"


class Files(Resource):

    def upload(
        self, file_path: str | Path, file_name: str | None = None, callback: Callback | None = None
    ):
        """Upload a local file, naming it after its base name unless told otherwise."""
        path = Path(file_path)
        content_type = mimetypes.guess_type(path.name)[0] or DEFAULT_CONTENT_TYPE
        return self.upload_buffer(
            path.read_bytes(), content_type, file_name or path.name, callback
        )

    def upload_buffer(
        self, buffer: bytes, content_type: str, file_name: str, callback: Callback | None = None
    ):
        return self._call(
            f"/files/{file_name}",
            callback,
            method="POST",
            body=buffer,
            headers={"Content-Type": content_type},
        )

    def delete(self, name: str, callback: Callback | None = None):
        """Delete an uploaded file. The server only allows this with the master key."""
        return self._call(f"/files/{name}", callback, method="DELETE")
