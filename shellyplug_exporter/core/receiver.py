"""Receptor del exporter - Punto de entrada del core.

Usa la arquitectura modular:
- transport/       → Cliente MQTT
- adapters/        → Topic → device id
- classification/  → Topic → MetricKind
- validation/      → Payload → float
- pipeline/        → MetricRouter
- metrics/         → GaugeStore Prometheus
- monitoring/      → Stats y health
"""

from __future__ import annotations

import logging
from typing import Callable, Optional

from prometheus_client import (
    CollectorRegistry,
    GCCollector,
    PlatformCollector,
    ProcessCollector,
)

from common.config import Settings

from .classification.topic_classifier import TopicClassifier
from .domain.errors import ConnectionLost
from .metrics.exporter_metrics import ExporterMetrics
from .metrics.gauge_store import PrometheusGaugeStore
from .monitoring.health import HealthChecker
from .pipeline.router import MetricRouter
from .transport.mqtt_client import MQTTClient

logger = logging.getLogger(__name__)


def _default_registry() -> CollectorRegistry:
    """Registry propio con las métricas process_* y python_* del proceso."""
    registry = CollectorRegistry()
    ProcessCollector(registry=registry)
    PlatformCollector(registry=registry)
    GCCollector(registry=registry)
    return registry


class ExporterReceiver:
    """Receptor MQTT → Prometheus.

    Componentes:
    - MQTTClient: Conexión y suscripción MQTT
    - MetricRouter: Clasificación y escritura de gauges
    - PrometheusGaugeStore: Series shellyplug_s_* sobre un registry propio
    - ExporterMetrics: Contadores de mensajes y estado de conexión

    La pérdida de conexión no se recupera aquí: se reenvía a
    ``on_connection_lost`` y el proceso decide terminar.
    """

    def __init__(
        self,
        settings: Settings,
        registry: Optional[CollectorRegistry] = None,
        on_connection_lost: Optional[Callable[[ConnectionLost], None]] = None,
        mqtt_client: Optional[MQTTClient] = None,
    ):
        self._settings = settings
        self._registry = registry if registry is not None else _default_registry()
        self._on_connection_lost = on_connection_lost

        self._store = PrometheusGaugeStore(self._registry)
        self._instruments = ExporterMetrics(self._registry)
        self._router = MetricRouter(
            self._store,
            classifier=TopicClassifier.for_topology(
                settings.topic_root, settings.device_pattern
            ),
            instruments=self._instruments,
        )
        self._mqtt = mqtt_client or MQTTClient(
            broker_host=settings.mqtt_host,
            broker_port=settings.mqtt_port,
            username=settings.mqtt_username,
            password=settings.mqtt_password,
            client_id=settings.mqtt_client_id,
            topic_root=settings.topic_root,
            keepalive=settings.mqtt_keepalive,
        )
        self._mqtt.set_message_handler(self._router.on_message)
        self._mqtt.set_lifecycle_handlers(
            on_connected=self._handle_connected,
            on_connection_lost=self._handle_connection_lost,
        )
        self._health = HealthChecker()
        self._running = False
        self._connection_error: Optional[ConnectionLost] = None

    def start(self) -> bool:
        """Conecta al broker. False si no se pudo establecer la conexión."""
        if not self._mqtt.connect():
            logger.error(
                "[RECEIVER] MQTT connection to %s:%d failed",
                self._settings.mqtt_host,
                self._settings.mqtt_port,
            )
            self._instruments.set_connected(False)
            return False

        self._running = True
        logger.info("[RECEIVER] Started, listening on %s", self._mqtt.subscription)
        return True

    def stop(self):
        """Detiene el receptor."""
        self._running = False
        self._mqtt.disconnect()
        self._instruments.set_connected(False)
        logger.info("[RECEIVER] Stopped. %s", self._router.stats)

    def _handle_connected(self):
        self._instruments.set_connected(True)

    def _handle_connection_lost(self, error: ConnectionLost):
        self._running = False
        self._connection_error = error
        self._instruments.set_connected(False)
        if self._on_connection_lost:
            self._on_connection_lost(error)

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    @property
    def router(self) -> MetricRouter:
        return self._router

    @property
    def connection_error(self) -> Optional[ConnectionLost]:
        return self._connection_error

    @property
    def is_running(self) -> bool:
        return self._running

    @property
    def is_connected(self) -> bool:
        return self._mqtt.is_connected

    @property
    def stats(self) -> dict:
        """Estadísticas del receptor."""
        return {
            "running": self._running,
            "connected": self.is_connected,
            "subscription": self._mqtt.subscription,
            **self._router.stats.to_dict(),
        }

    def health_check(self) -> dict:
        """Health check del receptor."""
        status = self._health.get_status(
            mqtt_connected=self.is_connected,
            stats=self._router.stats,
        )
        return status.to_dict()
