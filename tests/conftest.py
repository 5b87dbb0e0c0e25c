from __future__ import annotations

import pathlib

import pytest

ENV_KEYS = (
    "MQTT_HOST",
    "MQTT_PORT",
    "MQTT_USERNAME",
    "MQTT_PASSWORD",
    "MQTT_CLIENT_ID",
    "MQTT_KEEPALIVE",
    "MQTT_TOPIC_ROOT",
    "SHELLY_DEVICE_PATTERN",
    "METRICS_HOST",
    "METRICS_PORT",
    "LOG_LEVEL",
)


@pytest.fixture
def env(monkeypatch: pytest.MonkeyPatch, tmp_path: pathlib.Path) -> pytest.MonkeyPatch:
    """Entorno sin variables del exporter ni .env.

    setenv antes de delenv deja cada clave registrada en monkeypatch, así
    también se deshace lo que escriba load_dotenv durante el test.
    """
    for key in ENV_KEYS:
        monkeypatch.setenv(key, "")
        monkeypatch.delenv(key)
    monkeypatch.setenv("EXPORTER_ENV_FILE", str(tmp_path / "missing.env"))
    return monkeypatch
