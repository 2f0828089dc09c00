"""Differences between instants and duration rendering.

Integer division here truncates toward zero, so a negative duration
decomposes into non-positive components rather than borrowing from the
coarser unit.
"""

from dataclasses import dataclass
from typing import Optional

from .errors import InvalidArgument
from .instant import Instant

MILLIS_PER_SECOND = 1000
MILLIS_PER_MINUTE = 60 * MILLIS_PER_SECOND
MILLIS_PER_HOUR = 60 * MILLIS_PER_MINUTE
MILLIS_PER_DAY = 24 * MILLIS_PER_HOUR


def _div(value: int, unit: int) -> int:
    quotient = abs(value) // unit
    return quotient if value >= 0 else -quotient


def _rem(value: int, unit: int) -> int:
    return value - _div(value, unit) * unit


def _ceil_div(value: int, unit: int) -> int:
    return -(-value // unit)


def to_seconds(millis: int) -> int:
    return _div(millis, MILLIS_PER_SECOND)


def to_minutes(millis: int) -> int:
    return _div(millis, MILLIS_PER_MINUTE)


def to_hours(millis: int) -> int:
    return _div(millis, MILLIS_PER_HOUR)


def to_days(millis: int) -> int:
    return _div(millis, MILLIS_PER_DAY)


def to_duration_seconds(millis: int) -> int:
    """Seconds left after removing whole minutes."""
    return _div(_rem(millis, MILLIS_PER_MINUTE), MILLIS_PER_SECOND)


def to_duration_minutes(millis: int) -> int:
    """Minutes left after removing whole hours."""
    return _div(_rem(millis, MILLIS_PER_HOUR), MILLIS_PER_MINUTE)


def to_duration_hours(millis: int) -> int:
    """Hours left after removing whole days."""
    return _div(_rem(millis, MILLIS_PER_DAY), MILLIS_PER_HOUR)


@dataclass(frozen=True)
class Duration:
    """Elapsed time split into non-overlapping calendar units.

    Attributes:
        days: Whole days.
        hours: Hours after removing days (0-23).
        minutes: Minutes after removing hours (0-59).
        seconds: Seconds after removing minutes (0-59).
    """

    days: int
    hours: int
    minutes: int
    seconds: int


def decompose_duration(millis: int) -> Duration:
    """Split milliseconds into days, hours, minutes and seconds.

    Sub-second remainder is dropped.
    """
    return Duration(
        days=to_days(millis),
        hours=to_duration_hours(millis),
        minutes=to_duration_minutes(millis),
        seconds=to_duration_seconds(millis),
    )


def format_readable(millis: int) -> str:
    """Render milliseconds as fixed-width ``DD HH:MM:SS``."""
    d = decompose_duration(millis)
    return f"{d.days:02d} {d.hours:02d}:{d.minutes:02d}:{d.seconds:02d}"


def format_duration(millis: int) -> str:
    """Render milliseconds as compact ``Xd Xh Xm Xs``.

    Only strictly positive components appear, so ``3_661_000`` renders as
    ``1h 1m 1s`` and zero renders as an empty string.
    """
    d = decompose_duration(millis)
    parts = [
        f"{value}{unit}"
        for value, unit in ((d.days, "d"), (d.hours, "h"), (d.minutes, "m"), (d.seconds, "s"))
        if value > 0
    ]
    return " ".join(parts)


def differ_millis(a: Instant, b: Instant) -> int:
    """Absolute difference in milliseconds.

    Raises:
        InvalidArgument: If either instant is None.
    """
    if a is None or b is None:
        raise InvalidArgument("Both instants are required")
    return abs(a.millis - b.millis)


def differ_seconds(a: Optional[Instant], b: Optional[Instant]) -> int:
    """Difference in seconds, rounded up; 0 if either instant is None."""
    if a is None or b is None:
        return 0
    return _ceil_div(differ_millis(a, b), MILLIS_PER_SECOND)


def diff_minutes(a: Optional[Instant], b: Optional[Instant]) -> int:
    # rounds the already rounded seconds
    return _ceil_div(differ_seconds(a, b), 60)


def diff_hours(a: Optional[Instant], b: Optional[Instant]) -> int:
    # rounds the already rounded minutes
    return _ceil_div(diff_minutes(a, b), 60)


def format_duration_between(a: Optional[Instant], b: Optional[Instant]) -> Optional[str]:
    """Compact duration between two instants, or None if either is None."""
    if a is None or b is None:
        return None
    return format_duration(differ_millis(a, b))
