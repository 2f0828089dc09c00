"""Utility functions and helpers."""

from .logging import setup_logger
from .time_utils import (
    get_default_timezone,
    localize,
    resolve_timezone,
    set_default_timezone,
    to_epoch_millis,
    to_wall_clock,
)

__all__ = [
    "setup_logger",
    "get_default_timezone",
    "localize",
    "resolve_timezone",
    "set_default_timezone",
    "to_epoch_millis",
    "to_wall_clock",
]
