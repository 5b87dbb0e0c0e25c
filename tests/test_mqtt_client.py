"""Tests del cliente MQTT (paho mockeado).

Ejecutar:
    pytest tests/test_mqtt_client.py -v
"""

from unittest.mock import MagicMock, patch

import pytest

from shellyplug_exporter.core.domain import ConnectionLost
from shellyplug_exporter.core.transport import MQTTClient

PAHO_CLIENT = "shellyplug_exporter.core.transport.mqtt_client.mqtt.Client"


# =============================================================================
# FIXTURES
# =============================================================================

@pytest.fixture
def paho():
    """Instancia de paho.mqtt.client.Client mockeada."""
    with patch(PAHO_CLIENT) as factory:
        yield factory.return_value


@pytest.fixture
def client() -> MQTTClient:
    return MQTTClient(broker_host="broker", broker_port=1884, connect_timeout=0.3)


def _connack(client: MQTTClient, paho_instance, rc: int = 0):
    """Simula el CONNACK del broker al llamar a connect()."""
    def side_effect(*args, **kwargs):
        client._on_connect(paho_instance, None, {}, rc)
    return side_effect


# =============================================================================
# TEST 1: CONEXIÓN
# =============================================================================

class TestConnect:
    """Conexión, suscripción y fallos de arranque."""

    def test_connect_subscribes_to_wildcard(self, client, paho):
        paho.connect.side_effect = _connack(client, paho)
        connected = MagicMock()
        client.set_lifecycle_handlers(on_connected=connected)

        assert client.connect() is True

        paho.connect.assert_called_once_with("broker", 1884, keepalive=60)
        paho.loop_start.assert_called_once()
        paho.subscribe.assert_called_once_with("shellies/+/#", qos=0)
        connected.assert_called_once_with()
        assert client.is_connected is True

    def test_custom_root(self, paho):
        client = MQTTClient(topic_root="plugs", connect_timeout=0.3)
        paho.connect.side_effect = _connack(client, paho)

        client.connect()

        paho.subscribe.assert_called_once_with("plugs/+/#", qos=0)

    def test_credentials(self, paho):
        client = MQTTClient(username="user", password="secret", connect_timeout=0.3)
        paho.connect.side_effect = _connack(client, paho)

        client.connect()

        paho.username_pw_set.assert_called_once_with("user", "secret")

    def test_refused(self, client, paho):
        paho.connect.side_effect = _connack(client, paho, rc=5)

        assert client.connect() is False
        assert client.is_connected is False
        paho.subscribe.assert_not_called()

    def test_network_error(self, client, paho):
        paho.connect.side_effect = OSError("connection refused")

        assert client.connect() is False

    def test_timeout(self, client, paho):
        assert client.connect() is False
        paho.disconnect.assert_called_once()


# =============================================================================
# TEST 2: MENSAJES
# =============================================================================

class TestMessages:
    """Entrega de (topic, payload) al handler."""

    def test_delivers_topic_and_payload(self, client):
        handler = MagicMock()
        client.set_message_handler(handler)

        client._on_message(None, None, MagicMock(topic="shellies/x/temperature", payload=b"21"))

        handler.assert_called_once_with("shellies/x/temperature", b"21")

    def test_handler_errors_do_not_escape(self, client):
        client.set_message_handler(MagicMock(side_effect=RuntimeError("boom")))

        client._on_message(None, None, MagicMock(topic="t/x", payload=b"1"))

    def test_without_handler(self, client):
        client._on_message(None, None, MagicMock(topic="t/x", payload=b"1"))


# =============================================================================
# TEST 3: PÉRDIDA DE CONEXIÓN
# =============================================================================

class TestConnectionLost:
    """Una desconexión inesperada se reporta; una pedida no."""

    def test_unexpected_disconnect_is_reported(self, client, paho):
        paho.connect.side_effect = _connack(client, paho)
        lost = MagicMock()
        client.set_lifecycle_handlers(on_connection_lost=lost)
        client.connect()

        client._on_disconnect(paho, None, {}, 7)

        assert client.is_connected is False
        lost.assert_called_once()
        error = lost.call_args.args[0]
        assert isinstance(error, ConnectionLost)
        assert error.reason_code == 7

    def test_requested_disconnect_is_not_reported(self, client, paho):
        paho.connect.side_effect = _connack(client, paho)
        lost = MagicMock()
        client.set_lifecycle_handlers(on_connection_lost=lost)
        client.connect()

        client.disconnect()
        client._on_disconnect(paho, None, {}, 7)

        lost.assert_not_called()
        paho.loop_stop.assert_called_once()

    def test_clean_disconnect_is_not_reported(self, client, paho):
        paho.connect.side_effect = _connack(client, paho)
        lost = MagicMock()
        client.set_lifecycle_handlers(on_connection_lost=lost)
        client.connect()

        client._on_disconnect(paho, None, {}, 0)

        lost.assert_not_called()

    def test_reason_code_objects(self, client, paho):
        paho.connect.side_effect = _connack(client, paho, rc=MagicMock(value=0))
        lost = MagicMock()
        client.set_lifecycle_handlers(on_connection_lost=lost)

        assert client.connect() is True

        client._on_disconnect(paho, None, {}, MagicMock(value=16))
        lost.assert_called_once()
