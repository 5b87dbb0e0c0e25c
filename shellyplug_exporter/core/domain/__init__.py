"""Domain layer - Modelos y errores."""

from .errors import (
    ConnectionLost,
    MalformedTopic,
    ParseError,
    RoutingError,
    UnclassifiedTopic,
)
from .metric_kind import LABEL_NAMES, MetricKind, series_for
from .reading import Reading

__all__ = [
    "ConnectionLost",
    "MalformedTopic",
    "ParseError",
    "RoutingError",
    "UnclassifiedTopic",
    "LABEL_NAMES",
    "MetricKind",
    "series_for",
    "Reading",
]
