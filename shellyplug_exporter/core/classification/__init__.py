"""Classification layer - Tabla de patrones y clasificador de topics."""

from .topic_classifier import TopicClassifier, classify
from .topic_patterns import (
    DEFAULT_DEVICE_PATTERN,
    DEFAULT_PATTERNS,
    DEFAULT_TOPIC_ROOT,
    TopicPattern,
    build_pattern_table,
)

__all__ = [
    "TopicClassifier",
    "classify",
    "DEFAULT_DEVICE_PATTERN",
    "DEFAULT_PATTERNS",
    "DEFAULT_TOPIC_ROOT",
    "TopicPattern",
    "build_pattern_table",
]
