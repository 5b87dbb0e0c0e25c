"""Health checks del exporter."""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Optional

from .stats import Stats


@dataclass
class HealthStatus:
    """Estado de salud del exporter."""
    healthy: bool
    mqtt_connected: bool
    messages_received: int
    messages_processed: int
    messages_dropped: int
    last_message_age_seconds: Optional[float] = None

    def to_dict(self) -> dict:
        return {
            "healthy": self.healthy,
            "mqtt_connected": self.mqtt_connected,
            "messages_received": self.messages_received,
            "messages_processed": self.messages_processed,
            "messages_dropped": self.messages_dropped,
            "last_message_age_seconds": self.last_message_age_seconds,
        }


class HealthChecker:
    """Verifica el estado de salud del exporter.

    Sano significa conectado al broker; no recibir mensajes no es un fallo,
    los plugs pueden estar apagados.
    """

    def get_status(self, mqtt_connected: bool, stats: Stats) -> HealthStatus:
        age = None
        if stats.last_message_at > 0:
            age = time.time() - stats.last_message_at

        return HealthStatus(
            healthy=mqtt_connected,
            mqtt_connected=mqtt_connected,
            messages_received=stats.received,
            messages_processed=stats.processed,
            messages_dropped=stats.dropped,
            last_message_age_seconds=age,
        )
