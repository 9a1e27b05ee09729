# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""http-json-exporter CLI - serve a JSON endpoint as Prometheus metrics.

Usage
-----
    http-json-exporter \\
        --actuator.scrape-uri http://localhost:8080/actuator/metrics \\
        --actuator.timeout 5s \\
        --web.listen-address :9101 \\
        --web.telemetry-path /metrics

Every flag falls back to its ``HTTP_JSON_EXPORTER_*`` environment variable,
then to the built-in default (see ``ModelExporterConfig``).

Exported Metrics
----------------
    ``http_json_up``                  1 if the last scrape succeeded, else 0
    ``http_json_value{path="$.a.b"}`` value of every numeric JSON leaf

plus the standard process, platform and GC collectors.
"""

from __future__ import annotations

import logging
import sys

import click
from prometheus_client import (
    CollectorRegistry,
    GCCollector,
    PlatformCollector,
    ProcessCollector,
)
from pydantic import ValidationError

from http_json_exporter.collector import HttpJsonCollector
from http_json_exporter.errors import ExporterConfigurationError
from http_json_exporter.exposition import make_exporter_app, serve_exporter
from http_json_exporter.models import ModelExporterConfig
from http_json_exporter.utils import parse_duration, sanitize_url

logger = logging.getLogger(__name__)

_LOG_LEVELS: dict[str, int] = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "critical": logging.CRITICAL,
}
_LOG_FORMAT: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class DurationParamType(click.ParamType):
    """Click parameter accepting ``5s``, ``250ms``, ``1m30s`` or bare seconds."""

    name = "duration"

    def convert(
        self,
        value: object,
        param: click.Parameter | None,
        ctx: click.Context | None,
    ) -> float:
        if isinstance(value, (int, float)):
            return float(value)
        try:
            return parse_duration(str(value))
        except ValueError as exc:
            self.fail(str(exc), param, ctx)


DURATION = DurationParamType()


def _format_validation_error(exc: ValidationError) -> str:
    """One ``field: reason`` per error, without echoing the rejected input."""
    return "; ".join(
        f"{'.'.join(str(part) for part in error['loc'])}: {error['msg']}"
        for error in exc.errors()
    )


def build_registry(collector: HttpJsonCollector) -> CollectorRegistry:
    """Create a registry holding ``collector`` and the runtime collectors."""
    registry = CollectorRegistry()
    ProcessCollector(registry=registry)
    PlatformCollector(registry=registry)
    GCCollector(registry=registry)
    registry.register(collector)
    return registry


@click.command()
@click.option(
    "--web.listen-address",
    "listen_address",
    default=None,
    help="Address to listen on for web interface and telemetry. [default: :9101]",
)
@click.option(
    "--web.telemetry-path",
    "telemetry_path",
    default=None,
    help="Path under which to expose metrics. [default: /metrics]",
)
@click.option(
    "--actuator.scrape-uri",
    "scrape_uri",
    default=None,
    help="HTTP JSON API's URL. [default: http://localhost/metrics]",
)
@click.option(
    "--actuator.timeout",
    "timeout_seconds",
    type=DURATION,
    default=None,
    help="Timeout for trying to get stats from the JSON API. [default: 5s]",
)
@click.option(
    "--namespace",
    default=None,
    help="Prefix for exported metric names. [default: http_json]",
)
@click.option(
    "--log.level",
    "log_level",
    type=click.Choice(sorted(_LOG_LEVELS), case_sensitive=False),
    default="info",
    show_default=True,
    help="Only log messages with the given severity or above.",
)
def cli(
    listen_address: str | None,
    telemetry_path: str | None,
    scrape_uri: str | None,
    timeout_seconds: float | None,
    namespace: str | None,
    log_level: str,
) -> None:
    """Expose the numeric values of a JSON HTTP endpoint as Prometheus gauges."""
    logging.basicConfig(level=_LOG_LEVELS[log_level.lower()], format=_LOG_FORMAT)

    try:
        config = ModelExporterConfig.from_env(
            listen_address=listen_address,
            telemetry_path=telemetry_path,
            scrape_uri=scrape_uri,
            timeout_seconds=timeout_seconds,
            namespace=namespace,
        )
    except ValidationError as exc:
        click.echo(
            f"ERROR: Invalid configuration: {_format_validation_error(exc)}", err=True
        )
        sys.exit(1)
    except ExporterConfigurationError as exc:
        click.echo(f"ERROR: Invalid configuration: {exc}", err=True)
        sys.exit(1)

    collector = HttpJsonCollector(config)
    try:
        registry = build_registry(collector)
        app = make_exporter_app(registry, config.telemetry_path)
        logger.info(
            "Starting server: %s",
            config.listen_address,
            extra={
                "scrape_uri": sanitize_url(config.scrape_uri),
                "telemetry_path": config.telemetry_path,
            },
        )
        serve_exporter(app, config.listen_address)
    except KeyboardInterrupt:
        logger.info("Interrupted, shutting down")
    except OSError as exc:
        click.echo(
            f"ERROR: Cannot listen on {config.listen_address}: {exc}", err=True
        )
        sys.exit(1)
    finally:
        collector.close()


def main() -> None:
    """Entry point for the http-json-exporter console script."""
    cli()


__all__ = ["DURATION", "DurationParamType", "build_registry", "cli", "main"]
