"""Shared utilities for string normalization and duration handling."""

from .text import normalize_string
from .time import format_time, hours_to_minutes, parse_time_string

__all__ = [
    "normalize_string",
    "format_time",
    "hours_to_minutes",
    "parse_time_string",
]
