"""Validation layer - Parseo de payloads."""

from .reading_parser import parse_reading

__all__ = ["parse_reading"]
