"""Adapters - Topic MQTT → identidad de dispositivo."""

from .device_identity import extract_device_id

__all__ = ["extract_device_id"]
