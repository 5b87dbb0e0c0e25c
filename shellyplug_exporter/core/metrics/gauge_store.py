"""Interfaz del almacén de gauges y su implementación Prometheus.

Desacopla el router del registro de métricas: el router solo conoce
``set_gauge(series, label_values, value)``.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from typing import Dict, Iterable, Optional, Sequence

from prometheus_client import CollectorRegistry, Gauge

from ..domain.metric_kind import MetricKind

logger = logging.getLogger(__name__)


class GaugeStore(ABC):
    """Destino compartido de escrituras de gauge.

    Implementaciones:
    - PrometheusGaugeStore: GaugeVec por serie sobre un CollectorRegistry
    - NullGaugeStore: No-op para tests o arranque sin exportación
    """

    @abstractmethod
    def set_gauge(
        self,
        series: str,
        label_values: Sequence[str],
        value: float,
    ) -> None:
        """Fija el último valor observado de una serie para unas etiquetas.

        Debe ser seguro bajo invocación concurrente (upsert por etiquetas).
        """
        pass


class NullGaugeStore(GaugeStore):
    """No-op store."""

    def set_gauge(self, series: str, label_values: Sequence[str], value: float) -> None:
        return None


class UnknownSeries(KeyError):
    """La serie pedida no está registrada en el store."""


class PrometheusGaugeStore(GaugeStore):
    """Store respaldado por prometheus_client.

    Registra un GaugeVec por MetricKind en su propio registry, de modo que
    varias instancias (p.ej. en tests) no colisionan en el registry global.
    """

    def __init__(
        self,
        registry: Optional[CollectorRegistry] = None,
        kinds: Iterable[MetricKind] = tuple(MetricKind),
    ):
        self._registry = registry if registry is not None else CollectorRegistry()
        self._gauges: Dict[str, Gauge] = {}
        for kind in kinds:
            self._gauges[kind.series_name] = Gauge(
                kind.series_name,
                kind.help_text,
                list(kind.label_names),
                registry=self._registry,
            )
        logger.debug("[STORE] Registered series: %s", ", ".join(self._gauges))

    @property
    def registry(self) -> CollectorRegistry:
        return self._registry

    @property
    def series_names(self) -> list:
        return list(self._gauges)

    def set_gauge(self, series: str, label_values: Sequence[str], value: float) -> None:
        gauge = self._gauges.get(series)
        if gauge is None:
            raise UnknownSeries(series)
        gauge.labels(*label_values).set(value)
