# kvhttpd

A small threaded HTTP server. It serves HTML pages from a directory and
keeps key-value pairs that clients send as form data.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
kvhttpd
```

Options:

- `--host` – address to listen on (default: all interfaces)
- `--port` – port to listen on (default: 8090)
- `--root` – directory holding the pages (default: `./www`)

The server prints `Listening on: <port>` and logs each connection, the raw
request, the parsed request and the response at INFO level. It runs until
interrupted with Ctrl-C. If the address cannot be bound, it prints an error
and exits with status 1.

Each connection carries one request and gets one response, after which the
connection is closed. A request is read until the blank line that ends the
headers, until the client closes, or until 10239 bytes have arrived.

## Pages

A request for `/` returns `<root>/index.html`; any other path is appended to
the root directory. At most 10240 bytes of a file are sent. A file that
cannot be opened gives a short "404 Not Found" page (the status code is still
that of the method, e.g. 200 for `GET`).

## What each method does

The request body is read as form data (`key=value&key2=value2`); parts
without `=` are ignored. A body is only taken when the request has a
`Content-Length` header greater than 0 and below 2048.

- `GET` returns the page at the requested path with status 200.
- `POST` stores every pair in the body, then returns the page followed by a
  "Saved Pairs" list of everything stored, with status 201.
- `PUT` stores only the pairs that are not stored yet. If at least one was
  added it returns the page and the list with status 201; otherwise 204 with
  no body. A query string in the path is ignored when finding the page.
- `DELETE` removes the first stored copy of each pair it names. If at least
  one was removed it returns the page and the list with status 201;
  otherwise 204 with no body.
- Any other method, or a request line without method, path and version, gets
  a 400 Bad Request page.

The store holds at most 100 pairs; further additions are silently dropped.
Keys are cut to 63 characters and values to 255 when stored.

For example:

```
curl -X POST -d 'colour=blue&size=large' http://localhost:8090/
curl -X DELETE -d 'size=large' http://localhost:8090/
```

## Using it from Python

```python
from kvhttpd.store import KeyValueStore
from kvhttpd.request import parse_http_request
from kvhttpd.response import RequestHandler

store = KeyValueStore(100)
handler = RequestHandler(store, "www")
request = parse_http_request(
    "POST / HTTP/1.1\r\nContent-Length: 3\r\n\r\na=b"
)
print(handler.handle(request))   # the full response, as bytes
print(store.pairs())             # [('a', 'b')]
```

- `kvhttpd.store.KeyValueStore` – the bounded, thread-safe pair list
  (`add`, `contains`, `delete`, `pairs`, `len()`, `render_html`).
- `kvhttpd.request.parse_http_request` – turns raw request text into an
  `HttpRequest` with `method`, `path`, `version`, `headers` and `body`.
- `kvhttpd.response` – `RequestHandler` (with `handle` and one method per
  HTTP method), `FormOp`, `read_html_file` and `format_http_response`.
- `kvhttpd.server` – `KVHTTPServer`, a threaded socket server around a
  `RequestHandler`, `read_request`, and `main`, the function behind the
  `kvhttpd` command.

## What it does not do

The pairs live in memory only and are lost when the server stops. Form
values are not percent-decoded and are written into the page without HTML
escaping. Request paths are not checked, so any file reachable from the root
directory by the given path can be read. There is no keep-alive, no chunked
transfer and no content type other than `text/html`.