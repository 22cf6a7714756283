"""Threaded TCP server answering HTTP requests from a key/value store."""

from __future__ import annotations

import argparse
import logging
import socket
import socketserver
import sys

from .request import parse_http_request
from .response import RequestHandler
from .store import KeyValueStore

PORT = 8090
MAX_CLIENTS = 20
BUFFER_SIZE = 10240

log = logging.getLogger(__name__)


def read_request(sock: socket.socket) -> str:
    """Read until the end of the headers, the peer closes, or the buffer is full."""
    limit = BUFFER_SIZE - 1
    buffer = bytearray()
    while len(buffer) < limit:
        chunk = sock.recv(limit - len(buffer))
        if not chunk:
            break
        buffer += chunk
        if b"\r\n\r\n" in buffer:
            break
    return buffer.decode("utf-8", "surrogateescape")


class KVRequestHandler(socketserver.BaseRequestHandler):
    """Handles one connection: one request, one response, then close."""

    server: KVHTTPServer

    def handle(self) -> None:
        host, port = self.client_address[:2]
        log.info("Connection accepted: %s:%d", host, port)
        raw = read_request(self.request)
        log.info("--- RAW ------------\n%s", raw)
        request = parse_http_request(raw)
        log.info(
            "--- REQUEST --------------\n%s\n%s\n%s\n%s\n%s",
            request.method,
            request.path,
            request.version,
            request.headers,
            request.body,
        )
        response = self.server.handler.handle(request)
        log.info("--- RESPONSE --------------\n%s", response.decode("utf-8", "replace"))
        try:
            self.request.sendall(response)
        except OSError:
            log.exception("Response send error")


class KVHTTPServer(socketserver.ThreadingTCPServer):
    """Serves each connection on its own daemon thread."""

    daemon_threads = True
    allow_reuse_address = True
    request_queue_size = MAX_CLIENTS

    def __init__(self, address: tuple[str, int], handler: RequestHandler) -> None:
        self.handler = handler
        super().__init__(address, KVRequestHandler)


def main(argv: list[str] | None = None) -> int:
    """Run the server until interrupted; return the exit status."""
    parser = argparse.ArgumentParser(description="Serve pages and a key/value store over HTTP.")
    parser.add_argument("--host", default="", help="address to listen on (default: all)")
    parser.add_argument("--port", type=int, default=PORT, help=f"port (default: {PORT})")
    parser.add_argument("--root", default="./www", help="directory holding the pages")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(message)s")
    handler = RequestHandler(KeyValueStore(), args.root)
    try:
        server = KVHTTPServer((args.host, args.port), handler)
    except OSError as exc:
        print(f"webserver socket binding failed: {exc}", file=sys.stderr)
        return 1

    with server:
        print(f"Listening on: {server.server_address[1]}", flush=True)
        try:
            server.serve_forever()
        except KeyboardInterrupt:
            pass
    return 0