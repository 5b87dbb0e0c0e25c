"""Errores del motor de ruteo de métricas.

Los tres primeros se absorben por mensaje: el router descarta el mensaje
y sigue atendiendo. ConnectionLost es el único fatal y se reporta hacia
arriba para que el proceso decida terminar.
"""

from __future__ import annotations

from typing import Optional


class RoutingError(Exception):
    """Base de los errores que descartan un mensaje individual."""

    reason = "routing_error"


class MalformedTopic(RoutingError):
    """El topic no tiene segmento de dispositivo."""

    reason = "malformed_topic"


class UnclassifiedTopic(RoutingError):
    """Ningún patrón de la tabla coincide con el topic."""

    reason = "unclassified_topic"


class ParseError(RoutingError):
    """El payload no es un número válido."""

    reason = "parse_error"


class ConnectionLost(Exception):
    """Pérdida inesperada de la conexión con el broker MQTT."""

    def __init__(self, reason_code: Optional[object] = None, message: str = ""):
        self.reason_code = reason_code
        super().__init__(message or f"MQTT connection lost (rc={reason_code})")
