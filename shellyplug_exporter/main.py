"""Shelly Plug S exporter: MQTT → Prometheus.

Ejecutar:
    shellyplug-exporter --mqtt-host 192.168.1.10
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from typing import List, Optional

import uvicorn
from fastapi import FastAPI

from common.config import LOG_LEVELS, ConfigError, Settings, get_settings

from . import __version__
from .core.domain.errors import ConnectionLost
from .core.receiver import ExporterReceiver
from .endpoints import health_router, metrics_router

logger = logging.getLogger(__name__)

EXIT_CONNECTION = 1
EXIT_CONFIG = 2


def create_app(receiver: ExporterReceiver) -> FastAPI:
    app = FastAPI(title="Shelly Plug S Exporter", version=__version__)
    app.state.receiver = receiver
    app.include_router(metrics_router)
    app.include_router(health_router)
    return app


def _parse_args(argv: Optional[List[str]]) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Export Shelly Plug S MQTT readings as Prometheus gauges")
    p.add_argument("--mqtt-host", help="MQTT broker host (env MQTT_HOST)")
    p.add_argument("--mqtt-port", type=int, help="MQTT broker port (env MQTT_PORT)")
    p.add_argument("--metrics-port", type=int, help="HTTP port for /metrics (env METRICS_PORT)")
    p.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Root log level (env LOG_LEVEL)",
    )
    return p.parse_args(argv)


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    overrides = {
        "mqtt_host": args.mqtt_host,
        "mqtt_port": args.mqtt_port,
        "metrics_port": args.metrics_port,
        "log_level": args.log_level,
    }
    return replace(settings, **{k: v for k, v in overrides.items() if v is not None})


def main(argv: Optional[List[str]] = None) -> int:
    args = _parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s - %(message)s",
        handlers=[logging.StreamHandler()],
    )

    try:
        settings = apply_overrides(get_settings(), args)
    except ConfigError as e:
        logger.error("[EXPORTER] Invalid configuration: %s", e)
        return EXIT_CONFIG

    logging.getLogger().setLevel(settings.log_level)

    server: Optional[uvicorn.Server] = None

    def on_connection_lost(error: ConnectionLost) -> None:
        logger.error("[EXPORTER] %s, shutting down", error)
        if server is not None:
            server.should_exit = True

    receiver = ExporterReceiver(settings, on_connection_lost=on_connection_lost)
    if not receiver.start():
        return EXIT_CONNECTION

    server = uvicorn.Server(
        uvicorn.Config(
            create_app(receiver),
            host=settings.metrics_host,
            port=settings.metrics_port,
            log_level=settings.log_level.lower(),
        )
    )
    if receiver.connection_error is not None:
        receiver.stop()
        return EXIT_CONNECTION

    logger.info(
        "[EXPORTER] Serving metrics on http://%s:%d/metrics",
        settings.metrics_host,
        settings.metrics_port,
    )

    try:
        server.run()
    finally:
        receiver.stop()

    if receiver.connection_error is not None:
        return EXIT_CONNECTION
    return 0


if __name__ == "__main__":
    sys.exit(main())
