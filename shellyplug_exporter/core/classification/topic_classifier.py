"""TopicClassifier - Decide qué serie actualiza un topic."""

from __future__ import annotations

from typing import Iterable, Optional, Tuple

from ..domain.errors import UnclassifiedTopic
from ..domain.metric_kind import MetricKind
from .topic_patterns import (
    DEFAULT_DEVICE_PATTERN,
    DEFAULT_PATTERNS,
    DEFAULT_TOPIC_ROOT,
    TopicPattern,
    build_pattern_table,
)


class TopicClassifier:
    """Clasifica topics contra una tabla ordenada de patrones.

    Si más de un patrón coincide gana el primero de la tabla.
    """

    def __init__(self, patterns: Optional[Iterable[TopicPattern]] = None):
        self._patterns: Tuple[TopicPattern, ...] = (
            tuple(patterns) if patterns is not None else DEFAULT_PATTERNS
        )

    @classmethod
    def for_topology(
        cls,
        topic_root: str = DEFAULT_TOPIC_ROOT,
        device_pattern: str = DEFAULT_DEVICE_PATTERN,
    ) -> "TopicClassifier":
        """Construye el clasificador para un root y un patrón de dispositivo."""
        return cls(build_pattern_table(topic_root, device_pattern))

    @property
    def patterns(self) -> Tuple[TopicPattern, ...]:
        return self._patterns

    def classify(self, topic: str) -> Optional[MetricKind]:
        """Devuelve la magnitud del topic, o None si ningún patrón coincide."""
        for pattern in self._patterns:
            if pattern.matches(topic):
                return pattern.kind
        return None

    def require(self, topic: str) -> MetricKind:
        """Como classify, pero lanza UnclassifiedTopic si no hay match."""
        kind = self.classify(topic)
        if kind is None:
            raise UnclassifiedTopic(topic)
        return kind


_default_classifier = TopicClassifier()


def classify(topic: str) -> Optional[MetricKind]:
    """Clasifica con la tabla por defecto."""
    return _default_classifier.classify(topic)
