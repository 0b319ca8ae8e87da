"""Sensor value typing."""

from .value import SensorValue, ValueType, coerce, is_base64, parse_number

__all__ = [
    "SensorValue",
    "ValueType",
    "coerce",
    "is_base64",
    "parse_number",
]
