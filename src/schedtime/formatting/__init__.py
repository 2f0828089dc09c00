"""Conversion between instants and formatted strings."""

from .formatter import (
    DEFAULT_PATTERN,
    TIMESTAMP_PATTERN,
    date_to_string,
    format_date,
    format_timestamp,
    get_current_date,
    get_current_time,
    get_current_timestamp,
    get_schedule_date,
    parse,
    string_to_date,
)
from .patterns import CompiledPattern, compile_pattern

__all__ = [
    "DEFAULT_PATTERN",
    "TIMESTAMP_PATTERN",
    "CompiledPattern",
    "compile_pattern",
    "date_to_string",
    "format_date",
    "format_timestamp",
    "get_current_date",
    "get_current_time",
    "get_current_timestamp",
    "get_schedule_date",
    "parse",
    "string_to_date",
]
