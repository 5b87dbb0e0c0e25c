"""Metrics layer - Almacén de gauges y métricas del exporter."""

from .exporter_metrics import MESSAGE_STATUSES, ExporterMetrics
from .gauge_store import GaugeStore, NullGaugeStore, PrometheusGaugeStore, UnknownSeries

__all__ = [
    "MESSAGE_STATUSES",
    "ExporterMetrics",
    "GaugeStore",
    "NullGaugeStore",
    "PrometheusGaugeStore",
    "UnknownSeries",
]
