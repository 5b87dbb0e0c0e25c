"""Core module - Motor de clasificación de topics y ruteo de métricas.

Estructura:
- transport/       → Recepción MQTT
- domain/          → Modelos y errores de dominio
- adapters/        → Identidad de dispositivo
- classification/  → Tabla de patrones y clasificador
- validation/      → Parseo de payloads
- pipeline/        → Ruteo a gauges
- metrics/         → Almacén Prometheus
- monitoring/      → Stats y health
"""
