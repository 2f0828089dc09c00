"""Instant comparison, remaining time and timezone shifting."""

from datetime import tzinfo
from typing import Optional

from loguru import logger

from .durations import to_seconds
from .errors import InvalidArgument
from .instant import Instant
from .utils.time_utils import resolve_timezone, zone_or_default

__all__ = ["is_after", "remaining_seconds", "convert_timezone", "resolve_timezone"]


def is_after(a: Instant, b: Instant) -> bool:
    """True if ``a`` is strictly later than ``b``."""
    if a is None or b is None:
        raise InvalidArgument("Both instants are required")
    return a.millis > b.millis


def remaining_seconds(
    base_time: Optional[Instant],
    interval_seconds: int,
    *,
    now: Optional[Instant] = None,
) -> int:
    """Seconds left until ``base_time + interval_seconds``.

    Elapsed time is counted in whole seconds, truncated toward zero rather
    than floored. The two differ only when base_time lies in the future:
    with base_time 1.5 s ahead of now and a 10 s interval the result is 11,
    not 12. The result is negative once the target has passed.

    Args:
        base_time: Start of the interval.
        interval_seconds: Interval length.
        now: Current time; the wall clock is read when None.

    Returns:
        Remaining seconds, or 0 if base_time is None.
    """
    if base_time is None:
        return 0
    current = now if now is not None else Instant.now()
    return interval_seconds - to_seconds(current.millis - base_time.millis)


def convert_timezone(
    date: Instant,
    target_timezone_id: Optional[str],
    *,
    tz: Optional[tzinfo] = None,
) -> Instant:
    """Keep the wall-clock reading of ``date`` but move it to another zone.

    The ``yyyy-MM-dd HH:mm:ss`` reading of ``date`` in ``tz`` is taken as a
    reading in the target zone. This is not an instant-preserving
    conversion: 2020-01-01 00:00:00 in Asia/Shanghai becomes
    2020-01-01 00:00:00 in America/Denver. Milliseconds are dropped.

    Args:
        date: Instant to shift.
        target_timezone_id: Target zone identifier.
        tz: Zone ``date`` is read in (default zone if None).

    Returns:
        Shifted instant, or ``date`` itself if the target is empty.

    Raises:
        UnknownTimezone: If the target identifier is not recognized.
        InvalidArgument: If date is None and a target is given.
    """
    if not target_timezone_id:
        return date

    target = resolve_timezone(target_timezone_id)
    if date is None:
        raise InvalidArgument("The date must not be None")

    wall = date.wall_clock(zone_or_default(tz)).replace(microsecond=0)
    shifted = Instant.from_datetime(wall, target)
    logger.debug(f"Shifted {wall} to {target}: {date.millis} -> {shifted.millis}")
    return shifted
