"""Estadísticas de ruteo de mensajes."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Stats:
    """Contadores por resultado del ruteo.

    received = processed + dropped
    """

    received: int = 0
    processed: int = 0
    malformed_topic: int = 0
    unclassified_topic: int = 0
    parse_error: int = 0
    unknown_series: int = 0
    last_message_at: float = 0
    started_at: datetime = field(default_factory=_utcnow)

    def __str__(self) -> str:
        return (
            f"Stats: received={self.received} processed={self.processed} "
            f"dropped={self.dropped}"
        )

    @property
    def dropped(self) -> int:
        return (
            self.malformed_topic
            + self.unclassified_topic
            + self.parse_error
            + self.unknown_series
        )

    def record_drop(self, reason: str) -> None:
        """Cuenta un descarte por motivo (ver RoutingError.reason)."""
        setattr(self, reason, getattr(self, reason) + 1)

    def to_dict(self) -> dict:
        """Convierte a diccionario."""
        return {
            "received": self.received,
            "processed": self.processed,
            "dropped": self.dropped,
            "malformed_topic": self.malformed_topic,
            "unclassified_topic": self.unclassified_topic,
            "parse_error": self.parse_error,
            "unknown_series": self.unknown_series,
            "last_message_at": self.last_message_at,
            "started_at": self.started_at.isoformat(),
        }

    def reset(self):
        """Reinicia estadísticas."""
        self.received = 0
        self.processed = 0
        self.malformed_topic = 0
        self.unclassified_topic = 0
        self.parse_error = 0
        self.unknown_series = 0
        self.last_message_at = 0
        self.started_at = _utcnow()
