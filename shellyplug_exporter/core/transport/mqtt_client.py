"""Cliente MQTT para recepción de lecturas de los plugs."""

from __future__ import annotations

import logging
import time
from typing import Callable, Optional

import paho.mqtt.client as mqtt

from ..domain.errors import ConnectionLost

logger = logging.getLogger(__name__)

MessageCallback = Callable[[str, bytes], None]
ConnectionLostCallback = Callable[[ConnectionLost], None]


def _reason_value(reason_code) -> int:
    """ReasonCode (API v2) o int → valor numérico."""
    return int(getattr(reason_code, "value", reason_code))


class MQTTClient:
    """Cliente MQTT ligero para recepción de lecturas.

    Responsabilidades:
    - Conexión/desconexión a broker MQTT
    - Suscripción a ``<root>/+/#`` en QoS 0 en cada conexión
    - Delegación de mensajes a handler
    - Reporte de pérdida de conexión (no reconecta: lo decide el proceso)
    """

    def __init__(
        self,
        broker_host: str = "127.0.0.1",
        broker_port: int = 1883,
        username: Optional[str] = None,
        password: Optional[str] = None,
        client_id: str = "shellyplug-exporter",
        topic_root: str = "shellies",
        keepalive: int = 60,
        connect_timeout: float = 5.0,
    ):
        self.broker_host = broker_host
        self.broker_port = broker_port
        self.username = username
        self.password = password
        self.client_id = f"{client_id}-{int(time.time())}"
        self.subscription = f"{topic_root}/+/#"
        self.keepalive = keepalive
        self.connect_timeout = connect_timeout

        self._client: Optional[mqtt.Client] = None
        self._connected = False
        self._connect_refused = False
        self._stopping = False
        self._message_handler: Optional[MessageCallback] = None
        self._on_connected: Optional[Callable[[], None]] = None
        self._on_connection_lost: Optional[ConnectionLostCallback] = None

    def set_message_handler(self, handler: MessageCallback):
        """Configura el handler de mensajes."""
        self._message_handler = handler

    def set_lifecycle_handlers(
        self,
        on_connected: Optional[Callable[[], None]] = None,
        on_connection_lost: Optional[ConnectionLostCallback] = None,
    ):
        """Configura las notificaciones de conexión establecida y perdida."""
        self._on_connected = on_connected
        self._on_connection_lost = on_connection_lost

    def connect(self) -> bool:
        """Conecta al broker MQTT y arranca el loop de red."""
        self._stopping = False
        self._connect_refused = False

        try:
            self._client = mqtt.Client(
                callback_api_version=mqtt.CallbackAPIVersion.VERSION2,
                client_id=self.client_id,
                protocol=mqtt.MQTTv311,
                reconnect_on_failure=False,
            )

            self._client.on_connect = self._on_connect
            self._client.on_disconnect = self._on_disconnect
            self._client.on_message = self._on_message

            if self.username and self.password:
                self._client.username_pw_set(self.username, self.password)

            logger.info("[MQTT] Connecting to %s:%d", self.broker_host, self.broker_port)
            self._client.connect(self.broker_host, self.broker_port, keepalive=self.keepalive)
            self._client.loop_start()
        except Exception as e:
            logger.error("[MQTT] Connection failed: %s", e)
            return False

        # Esperar CONNACK
        deadline = time.monotonic() + self.connect_timeout
        while time.monotonic() < deadline:
            if self._connected:
                return True
            if self._connect_refused:
                break
            time.sleep(0.1)

        if not self._connect_refused:
            logger.error("[MQTT] Connection timeout after %.1fs", self.connect_timeout)
        self.disconnect()
        return False

    def disconnect(self):
        """Desconecta del broker sin reportar pérdida de conexión."""
        self._stopping = True
        if self._client:
            try:
                self._client.disconnect()
                self._client.loop_stop()
            except Exception as e:
                logger.warning("[MQTT] Disconnect error: %s", e)
        self._connected = False

    def _on_connect(self, client, userdata, flags, reason_code, properties=None):
        """Callback de conexión."""
        rc = _reason_value(reason_code)
        if rc != 0:
            self._connected = False
            self._connect_refused = True
            logger.error("[MQTT] Connection refused: rc=%d", rc)
            return

        self._connected = True
        logger.info("[MQTT] Connected to broker")
        client.subscribe(self.subscription, qos=0)
        logger.info("[MQTT] Subscribed to %s", self.subscription)
        if self._on_connected:
            self._on_connected()

    def _on_disconnect(self, client, userdata, flags, reason_code, properties=None):
        """Callback de desconexión."""
        was_connected = self._connected
        self._connected = False
        rc = _reason_value(reason_code)

        if self._stopping or rc == 0:
            logger.info("[MQTT] Disconnected")
            return

        logger.error("[MQTT] Connection lost (rc=%d)", rc)
        if was_connected and self._on_connection_lost:
            self._on_connection_lost(ConnectionLost(reason_code))

    def _on_message(self, client, userdata, msg):
        """Callback de mensaje - delega al handler."""
        if not self._message_handler:
            return
        try:
            self._message_handler(msg.topic, msg.payload)
        except Exception as e:
            logger.exception("[MQTT] Handler error on %s: %s", msg.topic, e)

    @property
    def is_connected(self) -> bool:
        return self._connected
