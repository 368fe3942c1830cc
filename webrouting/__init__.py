"""Building blocks for HTTP clients and servers: auth scopes, settings, frames, progress, routes, connections, session pooling and response handlers."""

__version__ = "0.1.0"