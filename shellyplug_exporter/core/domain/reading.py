"""Modelo de dominio para una lectura decodificada."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple

from .metric_kind import MetricKind, series_for


@dataclass(frozen=True)
class Reading:
    """Lectura de un dispositivo lista para escribirse como gauge.

    Se crea por mensaje y el router la consume de inmediato; nunca se retiene.
    """
    kind: MetricKind
    device_id: str
    value: float

    @property
    def series_name(self) -> str:
        return series_for(self.kind)

    @property
    def label_values(self) -> Tuple[str, ...]:
        return (self.device_id,)
