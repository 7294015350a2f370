"""Parsers that convert raw monitor exports into ordered HR/HRV samples."""

from .sensor_logger import (
    parse_sensor_logger_file,
    parse_sensor_logger_frame,
    parse_sensor_logger_text,
)

__all__ = [
    "parse_sensor_logger_file",
    "parse_sensor_logger_frame",
    "parse_sensor_logger_text",
]
