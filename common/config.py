from __future__ import annotations

import os
import re
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from shellyplug_exporter.core.classification.topic_patterns import (
    DEFAULT_DEVICE_PATTERN,
    build_pattern_table,
)


LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class ConfigError(ValueError):
    """Invalid value in the environment."""


@dataclass(frozen=True)
class Settings:
    mqtt_host: str
    mqtt_port: int
    mqtt_username: Optional[str]
    mqtt_password: Optional[str]
    mqtt_client_id: str
    mqtt_keepalive: int

    topic_root: str
    device_pattern: str

    metrics_host: str
    metrics_port: int

    log_level: str


def _int_env(name: str, default: int) -> int:
    raw = os.getenv(name, str(default))
    try:
        return int(raw)
    except ValueError:
        raise ConfigError(f"{name} must be an integer, got {raw!r}") from None


def get_settings() -> Settings:
    # Load env file (if present) but still allow overriding via real environment variables.
    env_file = os.getenv("EXPORTER_ENV_FILE", ".env")
    if env_file and Path(env_file).exists():
        load_dotenv(env_file, override=False)

    # The device id is read from the segment right after the root.
    topic_root = os.getenv("MQTT_TOPIC_ROOT", "shellies").strip("/")
    if not topic_root or any(c in topic_root for c in "/+#"):
        raise ConfigError(f"MQTT_TOPIC_ROOT must be a single topic level, got {topic_root!r}")

    # Validate the pattern as the classifier compiles it, embedded in the topic regex.
    device_pattern = os.getenv("SHELLY_DEVICE_PATTERN", DEFAULT_DEVICE_PATTERN)
    try:
        build_pattern_table(topic_root, device_pattern)
    except re.error as e:
        raise ConfigError(f"SHELLY_DEVICE_PATTERN is not a valid topic filter: {e}") from e

    log_level = os.getenv("LOG_LEVEL", "INFO").upper()
    if log_level not in LOG_LEVELS:
        raise ConfigError(f"LOG_LEVEL must be one of {', '.join(LOG_LEVELS)}, got {log_level!r}")

    return Settings(
        mqtt_host=os.getenv("MQTT_HOST", "127.0.0.1"),
        mqtt_port=_int_env("MQTT_PORT", 1883),
        mqtt_username=os.getenv("MQTT_USERNAME") or None,
        mqtt_password=os.getenv("MQTT_PASSWORD") or None,
        mqtt_client_id=os.getenv("MQTT_CLIENT_ID", "shellyplug-exporter"),
        mqtt_keepalive=_int_env("MQTT_KEEPALIVE", 60),
        topic_root=topic_root,
        device_pattern=device_pattern,
        metrics_host=os.getenv("METRICS_HOST", "0.0.0.0"),
        metrics_port=_int_env("METRICS_PORT", 9874),
        log_level=log_level,
    )
