"""Extracción del identificador de dispositivo desde el topic."""

from __future__ import annotations

from ..domain.errors import MalformedTopic

TOPIC_SEPARATOR = "/"
DEVICE_SEGMENT_INDEX = 1


def extract_device_id(topic: str) -> str:
    """Devuelve el segundo segmento del topic.

    ``shellies/shellyplug-s-AAAAAA/temperature`` → ``shellyplug-s-AAAAAA``.

    Raises:
        MalformedTopic: si el topic tiene menos de 2 segmentos (incluye "").
    """
    parts = topic.split(TOPIC_SEPARATOR)
    if len(parts) <= DEVICE_SEGMENT_INDEX:
        raise MalformedTopic(topic)
    return parts[DEVICE_SEGMENT_INDEX]
