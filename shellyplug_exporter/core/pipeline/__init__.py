"""Pipeline layer - Ruteo de mensajes a métricas."""

from .router import MetricRouter

__all__ = ["MetricRouter"]
