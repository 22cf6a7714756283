"""Parsing of raw HTTP request text."""

from __future__ import annotations

import re
from dataclasses import dataclass

METHOD_WIDTH = 7
PATH_WIDTH = 255
VERSION_WIDTH = 15
MAX_HEADERS_LENGTH = 1023
BODY_CAPACITY = 2048

_WHITESPACE = " \t\n\r\v\f"
_TOKEN_PATTERNS = [
    re.compile(rf"[{_WHITESPACE}]*([^{_WHITESPACE}]{{1,{width}}})")
    for width in (METHOD_WIDTH, PATH_WIDTH, VERSION_WIDTH)
]
_INTEGER = re.compile(rf"[{_WHITESPACE}]*([+-]?[0-9]+)")
_CONTENT_LENGTH = "content-length:"


@dataclass
class HttpRequest:
    """The parts of an HTTP request the server uses."""

    method: str = ""
    path: str = ""
    version: str = ""
    headers: str = ""
    body: str = ""


def _scan_request_line(raw: str) -> list[str]:
    fields = []
    pos = 0
    for pattern in _TOKEN_PATTERNS:
        match = pattern.match(raw, pos)
        if match is None:
            break
        fields.append(match.group(1))
        pos = match.end()
    return fields


def _content_length(headers: str) -> int:
    start = headers.lower().find(_CONTENT_LENGTH)
    if start < 0:
        return 0
    match = _INTEGER.match(headers, start + len(_CONTENT_LENGTH))
    return int(match.group(1)) if match else 0


def parse_http_request(raw: str) -> HttpRequest:
    """Split raw request text into request line, headers and body.

    A request line without all three parts becomes ``BAD / HTTP/1.0``.
    The body is taken only when a positive Content-Length below the body
    capacity is given.
    """
    request = HttpRequest()
    fields = _scan_request_line(raw)
    if len(fields) == 3:
        request.method, request.path, request.version = fields
    else:
        request.method, request.path, request.version = "BAD", "/", "HTTP/1.0"

    line_end = raw.find("\r\n")
    if line_end < 0:
        return request
    header_start = line_end + 2
    body_start = raw.find("\r\n\r\n")

    if body_start > header_start:
        request.headers = raw[header_start:body_start][:MAX_HEADERS_LENGTH]
        length = _content_length(request.headers)
        if 0 < length < BODY_CAPACITY:
            request.body = raw[body_start + 4 : body_start + 4 + length]
    else:
        request.headers = raw[header_start:][:MAX_HEADERS_LENGTH]
    return request