"""MetricRouter - Topic + payload → escritura de gauge.

Flujo por mensaje (todo o nada):
1. Identidad de dispositivo desde el topic
2. Clasificación del topic
3. Parseo del payload
4. set_gauge(serie, (device_id,), valor)

Los descartes se absorben: nunca se propaga un error al transporte.
"""

from __future__ import annotations

import logging
import time
from typing import Optional

from ..adapters.device_identity import extract_device_id
from ..classification.topic_classifier import TopicClassifier
from ..domain.errors import RoutingError
from ..domain.reading import Reading
from ..metrics.exporter_metrics import ExporterMetrics
from ..metrics.gauge_store import GaugeStore, UnknownSeries
from ..monitoring.stats import Stats
from ..validation.reading_parser import parse_reading

logger = logging.getLogger(__name__)

STATS_LOG_EVERY = 100
UNKNOWN_SERIES = "unknown_series"


class MetricRouter:
    """Rutea mensajes del bus hacia el almacén de gauges.

    Responsabilidades:
    - Extraer device id, clasificar y parsear
    - Escribir exactamente un gauge por mensaje válido
    - Contar descartes por motivo

    No toma locks: la sincronización la resuelve el GaugeStore.
    """

    def __init__(
        self,
        store: GaugeStore,
        classifier: Optional[TopicClassifier] = None,
        instruments: Optional[ExporterMetrics] = None,
    ):
        self._store = store
        self._classifier = classifier or TopicClassifier()
        self._instruments = instruments
        self._stats = Stats()

    def decode(self, topic: str, payload: bytes) -> Reading:
        """Convierte un mensaje en Reading.

        Raises:
            MalformedTopic, UnclassifiedTopic, ParseError
        """
        device_id = extract_device_id(topic)
        kind = self._classifier.require(topic)
        value = parse_reading(payload)
        return Reading(kind=kind, device_id=device_id, value=value)

    def route(self, topic: str, payload: bytes) -> None:
        """Procesa un mensaje. Punto de entrada único por mensaje entrante."""
        self._stats.received += 1
        self._stats.last_message_at = time.time()

        try:
            reading = self.decode(topic, payload)
        except RoutingError as e:
            self._stats.record_drop(e.reason)
            if self._instruments:
                self._instruments.record(e.reason)
            logger.debug("[ROUTER] Dropped %s: %s (topic=%s)", e.reason, e, topic)
            return

        try:
            self._store.set_gauge(reading.series_name, reading.label_values, reading.value)
        except UnknownSeries as e:
            self._stats.record_drop(UNKNOWN_SERIES)
            if self._instruments:
                self._instruments.record(UNKNOWN_SERIES)
            logger.warning("[ROUTER] Series %s not registered in store (topic=%s)", e, topic)
            return

        self._stats.processed += 1
        if self._instruments:
            self._instruments.record("processed")

        if self._stats.processed % STATS_LOG_EVERY == 0:
            logger.info("[ROUTER] %s", self._stats)

    # Capacidad registrada en el adaptador MQTT
    on_message = route

    @property
    def stats(self) -> Stats:
        return self._stats
