"""Decodificación del payload MQTT a valor numérico."""

from __future__ import annotations

import math
import re

from ..domain.errors import ParseError

# Signo opcional, dígitos con punto decimal opcional y exponente opcional.
# float() acepta además espacios, "_", "nan" e "inf": se filtran antes.
_NUMBER_RE = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?")


def parse_reading(payload: bytes) -> float:
    """Convierte el payload (texto UTF-8 de un decimal) a float.

    No hay validación de rango: negativos, cero y valores grandes pasan tal cual.

    Raises:
        ParseError: payload vacío, no decodificable o no numérico.
    """
    try:
        text = payload.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"payload is not UTF-8: {e}") from e

    if not _NUMBER_RE.fullmatch(text):
        raise ParseError(f"not a number: {text!r}")

    value = float(text)
    if math.isinf(value):
        raise ParseError(f"value out of float range: {text!r}")
    return value
