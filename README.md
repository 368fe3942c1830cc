# webrouting

`webrouting` provides small building blocks for HTTP clients and servers. It
uses only the standard library.

## What is in it

- `webrouting.auth_scope`: `AuthScope` and `AuthenticationType`. A scope
  describes the scheme, host, port, realm and auth type that a set of
  credentials applies to. An unset field matches anything. `AuthScope.match`
  scores how well two scopes fit.
- `webrouting.server_settings`: `BaseServerSettings` holds the host, port,
  SSL flag, sessions flag and IP whitelist/blacklist. Its `uri()` method
  returns the server's base URI. `HTTPServerParams`, `TCPServerParams`,
  `ThreadSettings` and `ThreadPriority` are plain configuration dataclasses.
- `webrouting.frames`: `SSEFrame(data, event="")` and `IndexedSSEFrame` are
  server-sent events. `WebSocketFrame` holds a payload plus header flags, with
  `FrameFlag` for the FIN/RSV bits and opcode properties such as `is_text` and
  `is_close`.
- `webrouting.progress`: `Progress` counts bytes transferred against an
  expected total. `fraction()` returns 1.0 for an empty transfer and -1.0 when
  the total is unknown.
- `webrouting.client_progress`: `ProgressRequestStream` and
  `ProgressResponseStream` wrap a raw stream. They call
  `callback(progress)` with a `Progress` as bytes move. The event dataclasses
  `ClientRequestProgressEvent`, `ClientResponseProgressEvent` and
  `ClientErrorEvent` describe client transfers.
- `webrouting.routing`: `BaseRoute` and `BaseRouteSettings` decide whether a
  route handles a `ServerRequest`. The checks are the path regex (full match),
  the method, the content type and whether the port is secure.
  `BaseRoute.handle_request` writes an HTML error page into a `ServerResponse`
  if nothing else has been sent.
- `webrouting.connection`: `BaseConnection` is a thread-safe queue of frames.
  Frames go on the queue only while the connection is open.
- `webrouting.sessions`: `SessionHost`, `extract_host` and
  `is_valid_session_for_host` work out where a request must go. `SessionPool`
  keeps idle sessions for reuse. By default it creates `http.client`
  connections.
- `webrouting.handlers`: `JSONResponseHandler` parses the body of a 2xx
  response as JSON and raises `HTTPStatusError` for any other status.
  `BufferResponseHandler` returns the body as bytes.
- `webrouting.http_utils`: `join(values, delimiter=" ", add_trailing_delimiter=False)`
  joins values into one string, and `consume(stream)` drains a stream and
  returns the number of bytes read.

## Matching credentials to a request

```python
from webrouting.auth_scope import AuthScope, AuthenticationType

stored = AuthScope(host="example.com", auth_type=AuthenticationType.BASIC)
wanted = AuthScope.from_uri("https://example.com:8443/private")

print(stored.match(wanted))  # 8: only the host is set on both sides and agrees
print(stored)  # Scheme: Any Host: example.com Port: Any Realm: Any AuthType: BASIC
```

## Deciding whether a route handles a request

```python
from webrouting.routing import BaseRoute, BaseRouteSettings, ServerRequest

settings = BaseRouteSettings(route_path_pattern="/api/.*", valid_http_methods={"GET"})
route = BaseRoute(settings)

request = ServerRequest(method="GET", uri="/api/items")
print(route.can_handle_request(request, is_secure_port=False))  # True
```

## Tracking upload progress

```python
import io
from webrouting.client_progress import ProgressRequestStream

def on_progress(progress):
    print(progress.fraction())

sink = io.BytesIO()
stream = ProgressRequestStream(sink, 11, on_progress, 4, 1.0)  # prints 0.0
stream.write(b"hello world")                                   # prints 1.0
```

## What it does not do

The package has no command and does not run a server. `BaseServerSettings`
only holds configuration, and nothing here listens on a socket.
`BaseRoute.dispatch` expects you to supply a server object that offers
`session_store.get_session(request, response)` and
`on_http_server_event(route, evt)`.

There is also no complete HTTP client. `SessionPool` hands out connections,
and the handlers read responses, but the package does not build requests,
follow redirects or apply proxies for you.

## Running the tests

```
pip install -e ".[test]"
pytest
```