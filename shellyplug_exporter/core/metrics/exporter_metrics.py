"""Métricas propias del exporter (observabilidad de descartes y conexión)."""

from __future__ import annotations

from prometheus_client import CollectorRegistry, Counter, Gauge

MESSAGE_STATUSES = (
    "processed",
    "malformed_topic",
    "unclassified_topic",
    "parse_error",
    "unknown_series",
)


class ExporterMetrics:
    """Contadores del exporter registrados junto a las series de dispositivos."""

    def __init__(self, registry: CollectorRegistry):
        self.messages = Counter(
            "shellyplug_exporter_messages_total",
            "Total MQTT messages handled by the exporter",
            ["status"],  # ver MESSAGE_STATUSES
            registry=registry,
        )
        self.mqtt_connected = Gauge(
            "shellyplug_exporter_mqtt_connected",
            "MQTT connection status",
            registry=registry,
        )
        # Series a 0 desde el arranque para que existan antes del primer mensaje
        for status in MESSAGE_STATUSES:
            self.messages.labels(status=status)

    def record(self, status: str) -> None:
        self.messages.labels(status=status).inc()

    def set_connected(self, connected: bool) -> None:
        self.mqtt_connected.set(1 if connected else 0)
