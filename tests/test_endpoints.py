"""Tests de la superficie HTTP (/metrics, /health, /ready, /stats)."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from common.config import Settings
from shellyplug_exporter.core.receiver import ExporterReceiver
from shellyplug_exporter.main import create_app


@pytest.fixture
def mqtt():
    client = MagicMock()
    client.subscription = "shellies/+/#"
    client.is_connected = True
    return client


@pytest.fixture
def receiver(mqtt) -> ExporterReceiver:
    settings = Settings(
        mqtt_host="broker",
        mqtt_port=1883,
        mqtt_username=None,
        mqtt_password=None,
        mqtt_client_id="test",
        mqtt_keepalive=60,
        topic_root="shellies",
        device_pattern=r"shellyplug-s-[^/]{6}",
        metrics_host="127.0.0.1",
        metrics_port=9874,
        log_level="INFO",
    )
    return ExporterReceiver(settings, mqtt_client=mqtt)


@pytest.fixture
def http(receiver) -> TestClient:
    return TestClient(create_app(receiver))


class TestMetricsEndpoint:
    """Exposición en formato texto de Prometheus."""

    def test_exposes_routed_values(self, receiver, http):
        receiver.router.route("shellies/shellyplug-s-AAAAAA/relay/0/power", b"42.5")
        receiver.router.route("shellies/shellyplug-s-BBBBBB/overtemperature", b"1")

        response = http.get("/metrics")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/plain")
        assert 'shellyplug_s_power{id="shellyplug-s-AAAAAA"} 42.5' in response.text
        assert 'shellyplug_s_overtemperature{id="shellyplug-s-BBBBBB"} 1.0' in response.text
        assert 'shellyplug_exporter_messages_total{status="processed"} 2.0' in response.text

    def test_openmetrics(self, http):
        response = http.get(
            "/metrics",
            headers={"Accept": "application/openmetrics-text; version=1.0.0"},
        )

        assert response.headers["content-type"].startswith("application/openmetrics-text")
        assert response.text.endswith("# EOF\n")


class TestHealthEndpoints:
    """Liveness, readiness y stats."""

    def test_health(self, http):
        assert http.get("/health").json() == {"status": "ok"}

    def test_ready_when_connected(self, http):
        response = http.get("/ready")

        assert response.status_code == 200
        assert response.json() == {"status": "ready"}

    def test_not_ready_when_disconnected(self, http, mqtt):
        mqtt.is_connected = False

        assert http.get("/ready").status_code == 503

    def test_stats(self, receiver, http):
        receiver.router.route("unrelated/topic/here", b"1")

        body = http.get("/stats").json()

        assert body["received"] == 1
        assert body["unclassified_topic"] == 1
        assert body["connected"] is True
