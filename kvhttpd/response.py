"""Request handling and HTTP response formatting."""

from __future__ import annotations

import enum
import os
from pathlib import Path

from .request import HttpRequest
from .store import KeyValueStore

MAX_FILE_SIZE = 10240
NOT_FOUND_HTML = "<html><body><h1>404 Not Found</h1></body></html>"
BAD_REQUEST_HTML = "<html><body><h1>400 Bad Request</h1></body></html>"

_STATUS_TEXT = {
    200: "OK",
    201: "Created",
    204: "No Content",
    400: "Bad Request",
}
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


class FormOp(enum.IntEnum):
    """What to do with each pair of submitted form data."""

    PUT = 0
    POST = 1
    DELETE = 2


def read_html_file(path: str | os.PathLike[str]) -> str:
    """Return at most MAX_FILE_SIZE bytes of a file, or a 404 page if it cannot be opened."""
    if Path(path).is_dir():
        return ""
    try:
        with open(path, "rb") as handle:
            data = handle.read(MAX_FILE_SIZE)
    except OSError:
        return NOT_FOUND_HTML
    return data.decode(_ENCODING, _ERRORS)


def format_http_response(status_code: int, content_type: str, body: str | None) -> bytes:
    """Build a complete HTTP/1.1 response that closes the connection."""
    status_text = _STATUS_TEXT.get(status_code, "Internal Server Error")
    payload = (body or "").encode(_ENCODING, _ERRORS)
    head = (
        f"HTTP/1.1 {status_code} {status_text}\r\n"
        f"Content-Length: {len(payload)}\r\n"
        f"Content-Type: {content_type}\r\n"
        "Connection: close\r\n"
        "\r\n"
    )
    return head.encode("ascii") + payload


def _form_pairs(body: str):
    for token in body.split("&"):
        if not token:
            continue
        key, sep, value = token.partition("=")
        if sep:
            yield key, value


class RequestHandler:
    """Serves files below ``root`` and edits a key/value store from form data."""

    def __init__(self, store: KeyValueStore, root: str | os.PathLike[str] = "./www") -> None:
        self.store = store
        self.root = os.fspath(root)

    def apply_form_data(self, body: str, op: FormOp) -> bool:
        """Apply ``op`` to every ``key=value`` pair; return whether anything changed."""
        changed = False
        for key, value in _form_pairs(body):
            if op is FormOp.POST:
                self.store.add(key, value)
                changed = True
            elif op is FormOp.PUT and not self.store.contains(key, value):
                self.store.add(key, value)
                changed = True
            elif op is FormOp.DELETE and self.store.delete(key, value):
                changed = True
        return changed

    def _resolve(self, path: str) -> str:
        if path == "/":
            return f"{self.root}/index.html"
        return f"{self.root}{path}"

    def _page_with_pairs(self, path: str) -> str:
        return self.store.render_html(read_html_file(self._resolve(path)))

    def handle_get(self, request: HttpRequest) -> str:
        """Return the page the request path names."""
        return read_html_file(self._resolve(request.path))

    def handle_post(self, request: HttpRequest) -> str:
        """Store every submitted pair and return the page with the pair list."""
        self.apply_form_data(request.body, FormOp.POST)
        return self._page_with_pairs(request.path)

    def handle_put(self, request: HttpRequest) -> str | None:
        """Store submitted pairs not yet present; None if nothing was added."""
        if not self.apply_form_data(request.body, FormOp.PUT):
            return None
        return self._page_with_pairs(request.path.split("?", 1)[0])

    def handle_delete(self, request: HttpRequest) -> str | None:
        """Delete submitted pairs; None if none of them was stored."""
        if not self.apply_form_data(request.body, FormOp.DELETE):
            return None
        return self._page_with_pairs(request.path)

    def handle(self, request: HttpRequest) -> bytes:
        """Dispatch on the request method and return the full response."""
        if request.method == "GET":
            return format_http_response(200, "text/html", self.handle_get(request))
        if request.method == "POST":
            return format_http_response(201, "text/html", self.handle_post(request))
        if request.method == "PUT":
            body = self.handle_put(request)
            return format_http_response(204 if body is None else 201, "text/html", body)
        if request.method == "DELETE":
            body = self.handle_delete(request)
            return format_http_response(204 if body is None else 201, "text/html", body)
        return format_http_response(400, "text/html", BAD_REQUEST_HTML)