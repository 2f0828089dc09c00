"""Formatting and parsing of instants.

Formatting fails fast on a malformed pattern. Parsing never raises: callers
treat a missing result as "no date available", so failures are logged and
reported as None.
"""

from datetime import tzinfo
from typing import Optional

from loguru import logger

from ..errors import InvalidArgument
from ..instant import Instant
from .patterns import compile_pattern

DEFAULT_PATTERN = "yyyy-MM-dd HH:mm:ss"
TIMESTAMP_PATTERN = "yyyyMMddHHmmssSSS"


def format_timestamp(
    millis: int,
    pattern: str = DEFAULT_PATTERN,
    *,
    tz: Optional[tzinfo] = None,
) -> str:
    """Format epoch milliseconds.

    Args:
        millis: Milliseconds since the epoch.
        pattern: Format pattern.
        tz: Zone to render in (default zone if None).

    Returns:
        Formatted string.

    Raises:
        InvalidPattern: If the pattern is malformed.
    """
    compiled = compile_pattern(pattern)
    return compiled.format(Instant(millis).to_datetime(tz))


def format_date(date: Instant, pattern: str, *, tz: Optional[tzinfo] = None) -> str:
    """Format an instant.

    Raises:
        InvalidArgument: If date is None.
        InvalidPattern: If the pattern is malformed.
    """
    if date is None:
        raise InvalidArgument("date must not be None")
    return format_timestamp(date.millis, pattern, tz=tz)


def date_to_string(date: Instant, *, tz: Optional[tzinfo] = None) -> str:
    return format_date(date, DEFAULT_PATTERN, tz=tz)


def parse(text: str, pattern: str, *, tz: Optional[tzinfo] = None) -> Optional[Instant]:
    """Parse text against a pattern.

    Text is read as wall-clock time in ``tz`` unless the pattern carries a
    UTC offset. Fields absent from the pattern take their earliest value,
    so a date-only pattern yields midnight.

    Args:
        text: Text to parse.
        pattern: Format pattern.
        tz: Zone the wall-clock fields belong to (default zone if None).

    Returns:
        Parsed instant, or None if text or pattern is invalid.
    """
    try:
        parsed = compile_pattern(pattern).parse(text)
        return Instant.from_datetime(parsed, tz)
    except Exception as e:
        logger.error(f"Error while parsing date {text!r} with pattern {pattern!r}: {e}")
        return None


def string_to_date(text: str, *, tz: Optional[tzinfo] = None) -> Optional[Instant]:
    return parse(text, DEFAULT_PATTERN, tz=tz)


def get_schedule_date(schedule: str, *, tz: Optional[tzinfo] = None) -> Optional[Instant]:
    """Read a schedule time written in the default pattern."""
    return string_to_date(schedule, tz=tz)


def get_current_time(pattern: str = DEFAULT_PATTERN, *, tz: Optional[tzinfo] = None) -> str:
    return format_timestamp(Instant.now().millis, pattern, tz=tz)


def get_current_timestamp(*, tz: Optional[tzinfo] = None) -> str:
    """Current time as ``yyyyMMddHHmmssSSS``."""
    return get_current_time(TIMESTAMP_PATTERN, tz=tz)


def get_current_date(*, tz: Optional[tzinfo] = None) -> Optional[Instant]:
    """Current time truncated to the second."""
    return parse(get_current_time(tz=tz), DEFAULT_PATTERN, tz=tz)
