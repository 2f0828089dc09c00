"""Calendar-field arithmetic and period boundaries.

Year, month, week and day arithmetic works on wall-clock fields, so the time
of day survives a DST change. Hour, minute, second and millisecond arithmetic
adds elapsed time. Weeks start on Monday.
"""

from datetime import datetime, timedelta, tzinfo
from typing import Callable, Optional, Union

from dateutil.relativedelta import relativedelta

from .errors import InvalidArgument
from .instant import CalendarField, Instant
from .utils.time_utils import zone_or_default

ELAPSED_MILLIS = {
    CalendarField.HOUR: 3_600_000,
    CalendarField.MINUTE: 60_000,
    CalendarField.SECOND: 1_000,
    CalendarField.MILLISECOND: 1,
}


def _require(date: Optional[Instant]) -> Instant:
    if date is None:
        raise InvalidArgument("The date must not be None")
    return date


def _on_wall_clock(
    date: Optional[Instant],
    tz: Optional[tzinfo],
    transform: Callable[[datetime], datetime],
) -> Instant:
    """Apply ``transform`` to the wall-clock fields of ``date`` in ``tz``."""
    zone = zone_or_default(tz)
    wall = _require(date).wall_clock(zone)
    return Instant.from_datetime(transform(wall), zone)


def add_field(
    date: Instant,
    field: Union[CalendarField, str],
    amount: int,
    *,
    tz: Optional[tzinfo] = None,
) -> Instant:
    """Add ``amount`` units of a calendar field.

    Adding months or years keeps the day of month where possible and clamps
    it to the last day otherwise (Jan 31 + 1 month is Feb 28 or 29).

    Args:
        date: Instant to shift.
        field: Calendar field or its name.
        amount: Units to add, may be negative.
        tz: Zone whose calendar applies (default zone if None).

    Returns:
        Shifted instant.

    Raises:
        InvalidArgument: If date is None or field is not a calendar field.
    """
    _require(date)
    try:
        field = CalendarField(field)
    except ValueError:
        raise InvalidArgument(f"Unsupported calendar field: {field!r}") from None

    if field in ELAPSED_MILLIS:
        return Instant(date.millis + amount * ELAPSED_MILLIS[field])

    delta = relativedelta(**{f"{field.value}s": amount})
    return _on_wall_clock(date, tz, lambda wall: wall + delta)


def add_years(date: Instant, amount: int, *, tz: Optional[tzinfo] = None) -> Instant:
    return add_field(date, CalendarField.YEAR, amount, tz=tz)


def add_months(date: Instant, amount: int, *, tz: Optional[tzinfo] = None) -> Instant:
    return add_field(date, CalendarField.MONTH, amount, tz=tz)


def add_weeks(date: Instant, amount: int, *, tz: Optional[tzinfo] = None) -> Instant:
    return add_field(date, CalendarField.WEEK, amount, tz=tz)


def add_days(date: Instant, amount: int, *, tz: Optional[tzinfo] = None) -> Instant:
    return add_field(date, CalendarField.DAY, amount, tz=tz)


def add_hours(date: Instant, amount: int, *, tz: Optional[tzinfo] = None) -> Instant:
    return add_field(date, CalendarField.HOUR, amount, tz=tz)


def add_minutes(date: Instant, amount: int, *, tz: Optional[tzinfo] = None) -> Instant:
    return add_field(date, CalendarField.MINUTE, amount, tz=tz)


def add_seconds(date: Instant, amount: int, *, tz: Optional[tzinfo] = None) -> Instant:
    return add_field(date, CalendarField.SECOND, amount, tz=tz)


def add_milliseconds(date: Instant, amount: int, *, tz: Optional[tzinfo] = None) -> Instant:
    return add_field(date, CalendarField.MILLISECOND, amount, tz=tz)


def get_some_day(date: Instant, offset_days: int, *, tz: Optional[tzinfo] = None) -> Instant:
    return add_field(date, CalendarField.DAY, offset_days, tz=tz)


def get_monday(date: Instant, *, tz: Optional[tzinfo] = None) -> Instant:
    """Monday of the week containing ``date``, same time of day."""
    return _on_wall_clock(date, tz, lambda wall: wall - timedelta(days=wall.weekday()))


def get_sunday(date: Instant, *, tz: Optional[tzinfo] = None) -> Instant:
    """Sunday ending the week containing ``date``, same time of day."""
    return _on_wall_clock(date, tz, lambda wall: wall + timedelta(days=6 - wall.weekday()))


def get_first_day_of_month(date: Instant, *, tz: Optional[tzinfo] = None) -> Instant:
    return _on_wall_clock(date, tz, lambda wall: wall.replace(day=1))


def get_last_day_of_month(date: Instant, *, tz: Optional[tzinfo] = None) -> Instant:
    """Last day of the month containing ``date``, same time of day.

    Steps to the first day of the next month and back one day, which
    covers month lengths and leap years without a table.
    """

    def last_day(wall: datetime) -> datetime:
        first_of_next = (wall + relativedelta(months=1)).replace(day=1)
        return first_of_next - timedelta(days=1)

    return _on_wall_clock(date, tz, last_day)


def get_start_of_day(date: Instant, *, tz: Optional[tzinfo] = None) -> Instant:
    return _on_wall_clock(
        date, tz, lambda wall: wall.replace(hour=0, minute=0, second=0, microsecond=0)
    )


def get_end_of_day(date: Instant, *, tz: Optional[tzinfo] = None) -> Instant:
    return _on_wall_clock(
        date, tz, lambda wall: wall.replace(hour=23, minute=59, second=59, microsecond=999_000)
    )


def get_start_of_hour(date: Instant, *, tz: Optional[tzinfo] = None) -> Instant:
    return _on_wall_clock(date, tz, lambda wall: wall.replace(minute=0, second=0, microsecond=0))


def get_end_of_hour(date: Instant, *, tz: Optional[tzinfo] = None) -> Instant:
    return _on_wall_clock(
        date, tz, lambda wall: wall.replace(minute=59, second=59, microsecond=999_000)
    )


def get_some_hour_of_day(date: Instant, offset_hours: int, *, tz: Optional[tzinfo] = None) -> Instant:
    """Top of the hour ``offset_hours`` away from the hour of ``date``.

    The hour may roll into a neighbouring day.
    """
    return _on_wall_clock(
        date,
        tz,
        lambda wall: wall.replace(minute=0, second=0, microsecond=0) + timedelta(hours=offset_hours),
    )


def get_hour_index(date: Instant, *, tz: Optional[tzinfo] = None) -> int:
    """Hour of day, 0-23."""
    return _require(date).wall_clock(zone_or_default(tz)).hour
