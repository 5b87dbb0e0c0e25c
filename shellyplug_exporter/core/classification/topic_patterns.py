"""Tabla de patrones de topic → MetricKind.

Un topic válido tiene la forma ``<root>/<device>/<subpath>``. El segmento de
dispositivo es un filtro, no un parser: por defecto exige el prefijo
``shellyplug-s-`` más 6 caracteres, pero se puede aflojar por configuración.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Tuple

from ..adapters.device_identity import TOPIC_SEPARATOR
from ..domain.metric_kind import MetricKind

DEFAULT_TOPIC_ROOT = "shellies"
DEFAULT_DEVICE_PATTERN = r"shellyplug-s-[^/]{6}"
DEVICE_GROUP = "device"


@dataclass(frozen=True)
class TopicPattern:
    """Asociación inmutable entre un matcher de topic y una magnitud."""
    kind: MetricKind
    regex: re.Pattern

    def matches(self, topic: str) -> bool:
        match = self.regex.fullmatch(topic)
        if match is None:
            return False
        # El device id es un único segmento: un match que cruza "/" no cuenta
        device = match.groupdict().get(DEVICE_GROUP)
        return device is None or TOPIC_SEPARATOR not in device


def build_pattern(
    kind: MetricKind,
    topic_root: str = DEFAULT_TOPIC_ROOT,
    device_pattern: str = DEFAULT_DEVICE_PATTERN,
) -> TopicPattern:
    """Compila el matcher anclado de una magnitud.

    El root y el subpath son literales; device_pattern es una regex que
    debe cubrir un único segmento.
    """
    expression = "{root}/(?P<{group}>{device})/{subpath}".format(
        group=DEVICE_GROUP,
        root=re.escape(topic_root),
        device=device_pattern,
        subpath=re.escape(kind.subpath),
    )
    return TopicPattern(kind=kind, regex=re.compile(expression))


def build_pattern_table(
    topic_root: str = DEFAULT_TOPIC_ROOT,
    device_pattern: str = DEFAULT_DEVICE_PATTERN,
) -> Tuple[TopicPattern, ...]:
    """Tabla en orden de prioridad: Power, Energy, Temperature, OverTemperature."""
    return tuple(
        build_pattern(kind, topic_root, device_pattern) for kind in MetricKind
    )


DEFAULT_PATTERNS: Tuple[TopicPattern, ...] = build_pattern_table()
