"""Transport layer - Recepción de datos MQTT."""

from .mqtt_client import MQTTClient

__all__ = ["MQTTClient"]
