"""Tipos de magnitud que reporta un Shelly Plug S y su serie Prometheus."""

from __future__ import annotations

from enum import Enum
from typing import Tuple

LABEL_NAMES: Tuple[str, ...] = ("id",)


class MetricKind(Enum):
    """Conjunto cerrado de magnitudes conocidas por el exporter.

    Cada valor es (subpath del topic, nombre de serie, help).
    """

    POWER = (
        "relay/0/power",
        "shellyplug_s_power",
        "Instantaneous power consumption rate in Watts",
    )
    ENERGY = (
        "relay/0/energy",
        "shellyplug_s_energy",
        "Amount of energy consumed in Watt-minutes",
    )
    TEMPERATURE = (
        "temperature",
        "shellyplug_s_temperature",
        "Reports internal device temperature in celsius",
    )
    OVERTEMPERATURE = (
        "overtemperature",
        "shellyplug_s_overtemperature",
        "Reports 1 when device has overheated, normally 0",
    )

    def __init__(self, subpath: str, series_name: str, help_text: str):
        self.subpath = subpath
        self.series_name = series_name
        self.help_text = help_text

    @property
    def label_names(self) -> Tuple[str, ...]:
        return LABEL_NAMES


def series_for(kind: MetricKind) -> str:
    """Nombre de la serie que actualiza una magnitud."""
    return kind.series_name
