# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Exporter HTTP surface: telemetry path, landing page, threaded server.

The telemetry path is served by ``prometheus_client.make_wsgi_app``; every
other path answers with a small HTML landing page linking to it. The server
handles each request on its own thread, so concurrent Prometheus pulls reach
the collector in parallel and are serialized by the collector lock.
"""

from __future__ import annotations

import html
import logging
import socket
from collections.abc import Callable, Iterable
from socketserver import ThreadingMixIn
from typing import Any
from wsgiref.simple_server import WSGIRequestHandler, WSGIServer, make_server

from prometheus_client import REGISTRY, CollectorRegistry, make_wsgi_app

logger = logging.getLogger(__name__)

WsgiApp = Callable[[dict[str, Any], Callable[..., Any]], Iterable[bytes]]

LANDING_PAGE_TITLE: str = "HTTP JSON Exporter"

_LANDING_PAGE_TEMPLATE: str = """<html>
<head><title>{title}</title></head>
<body>
<h1>{title}</h1>
<p><a href='{telemetry_path}'>Metrics</a></p>
</body>
</html>
"""


def render_landing_page(telemetry_path: str) -> bytes:
    """Render the landing page linking to ``telemetry_path``."""
    return _LANDING_PAGE_TEMPLATE.format(
        title=LANDING_PAGE_TITLE,
        telemetry_path=html.escape(telemetry_path, quote=True),
    ).encode("utf-8")


def make_exporter_app(
    registry: CollectorRegistry = REGISTRY, telemetry_path: str = "/metrics"
) -> WsgiApp:
    """Build the exporter WSGI app.

    Args:
        registry: Registry serialized on the telemetry path
        telemetry_path: Path serving the Prometheus exposition format

    Returns:
        A WSGI application.
    """
    metrics_app = make_wsgi_app(registry)
    landing_page = render_landing_page(telemetry_path)

    def exporter_app(
        environ: dict[str, Any], start_response: Callable[..., Any]
    ) -> Iterable[bytes]:
        if environ.get("PATH_INFO", "/") == telemetry_path:
            return metrics_app(environ, start_response)
        start_response(
            "200 OK",
            [
                ("Content-Type", "text/html; charset=utf-8"),
                ("Content-Length", str(len(landing_page))),
            ],
        )
        return [landing_page]

    return exporter_app


def parse_listen_address(address: str) -> tuple[str, int]:
    """Split ``[host]:port`` into host and port.

    An empty host means all interfaces. IPv6 hosts use brackets
    (``[::1]:9101``).

    Raises:
        ValueError: If the address has no port or the port is invalid.

    Example:
        >>> parse_listen_address(":9101")
        ('', 9101)
        >>> parse_listen_address("[::1]:9101")
        ('::1', 9101)
    """
    host, sep, port_text = address.rpartition(":")
    if not sep:
        raise ValueError(f"listen address '{address}' is missing a port")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    elif ":" in host:
        raise ValueError(f"IPv6 listen address '{address}' must use brackets")
    try:
        port = int(port_text)
    except ValueError as e:
        raise ValueError(f"listen address '{address}' has an invalid port") from e
    if not 0 <= port <= 65535:
        raise ValueError(f"listen address '{address}' port out of range")
    return host, port


class _ThreadingWSGIServer(ThreadingMixIn, WSGIServer):
    """WSGI server that handles each request on a daemon thread."""

    daemon_threads = True


class _ThreadingWSGIServerV6(_ThreadingWSGIServer):
    address_family = socket.AF_INET6


class _LoggingRequestHandler(WSGIRequestHandler):
    """Route access logs through ``logging`` instead of stderr."""

    def log_message(self, format: str, *args: Any) -> None:  # noqa: A002
        logger.debug(format, *args)


def make_exporter_server(app: WsgiApp, listen_address: str) -> WSGIServer:
    """Bind a threaded WSGI server for ``app`` on ``listen_address``."""
    host, port = parse_listen_address(listen_address)
    server_class = _ThreadingWSGIServerV6 if ":" in host else _ThreadingWSGIServer
    return make_server(
        host,
        port,
        app,
        server_class=server_class,
        handler_class=_LoggingRequestHandler,
    )


def serve_exporter(app: WsgiApp, listen_address: str) -> None:
    """Serve ``app`` on ``listen_address`` until interrupted."""
    server = make_exporter_server(app, listen_address)
    logger.info(
        "Listening on %s",
        listen_address,
        extra={"bound_port": server.server_port},
    )
    try:
        server.serve_forever()
    finally:
        server.server_close()


__all__: list[str] = [
    "LANDING_PAGE_TITLE",
    "make_exporter_app",
    "make_exporter_server",
    "parse_listen_address",
    "render_landing_page",
    "serve_exporter",
]
