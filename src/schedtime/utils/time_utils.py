"""Time and timezone utility functions."""

import re
from datetime import datetime, timedelta, timezone as dt_timezone, tzinfo
from typing import Optional, Union

import pytz
from dateutil import tz as dateutil_tz
from loguru import logger

from ..errors import UnknownTimezone

EPOCH = datetime(1970, 1, 1, tzinfo=dt_timezone.utc)

# Legacy identifiers read as fixed offsets in minutes. Checked before pytz,
# whose zones of the same names carry offset history.
FIXED_OFFSET_IDS = {"EST": -300, "MST": -420, "HST": -600}

# Legacy three-letter identifiers still found in scheduler configs.
SHORT_IDS = {
    "ACT": "Australia/Darwin",
    "AET": "Australia/Sydney",
    "AGT": "America/Argentina/Buenos_Aires",
    "ART": "Africa/Cairo",
    "AST": "America/Anchorage",
    "BET": "America/Sao_Paulo",
    "BST": "Asia/Dhaka",
    "CAT": "Africa/Harare",
    "CNT": "America/St_Johns",
    "CST": "America/Chicago",
    "CTT": "Asia/Shanghai",
    "EAT": "Africa/Addis_Ababa",
    "ECT": "Europe/Paris",
    "IET": "America/Indiana/Indianapolis",
    "IST": "Asia/Kolkata",
    "JST": "Asia/Tokyo",
    "MIT": "Pacific/Apia",
    "NET": "Asia/Yerevan",
    "NST": "Pacific/Auckland",
    "PLT": "Asia/Karachi",
    "PNT": "America/Phoenix",
    "PRT": "America/Puerto_Rico",
    "PST": "America/Los_Angeles",
    "SST": "Pacific/Guadalcanal",
    "VST": "Asia/Ho_Chi_Minh",
}

_OFFSET_ID = re.compile(r"^(?:GMT|UTC)([+-])(\d{1,2})(?::?(\d{2}))?$")

_default_timezone: tzinfo = dateutil_tz.tzlocal()


def resolve_timezone(timezone_id: Optional[str]) -> Optional[tzinfo]:
    """Look up a timezone by identifier.

    Accepts IANA names (``America/Denver``), ``UTC``/``GMT``, fixed offsets
    (``GMT+8``, ``UTC-05:30``, ``EST``, ``MST``, ``HST``) and the legacy
    three-letter abbreviations in ``SHORT_IDS``.

    Args:
        timezone_id: Timezone identifier.

    Returns:
        Timezone, or None if the identifier is empty.

    Raises:
        UnknownTimezone: If the identifier is not recognized.
    """
    if not timezone_id:
        return None

    fixed = FIXED_OFFSET_IDS.get(timezone_id.upper())
    if fixed is not None:
        return pytz.FixedOffset(fixed)

    try:
        return pytz.timezone(timezone_id)
    except pytz.exceptions.UnknownTimeZoneError:
        pass

    alias = SHORT_IDS.get(timezone_id.upper())
    if alias is not None:
        return pytz.timezone(alias)

    match = _OFFSET_ID.match(timezone_id.upper())
    if match:
        sign, hours, minutes = match.groups()
        hours, minutes = int(hours), int(minutes or 0)
        if hours <= 23 and minutes <= 59:
            offset = hours * 60 + minutes
            return pytz.FixedOffset(-offset if sign == "-" else offset)

    raise UnknownTimezone(f"Unknown timezone: {timezone_id}")


def get_default_timezone() -> tzinfo:
    """Timezone used when an operation is not given one explicitly."""
    return _default_timezone


def set_default_timezone(timezone: Union[tzinfo, str, None]) -> tzinfo:
    """Replace the process default timezone.

    Args:
        timezone: tzinfo, timezone identifier, or None/empty for the host
            local timezone.

    Returns:
        The timezone now in effect.

    Raises:
        UnknownTimezone: If an identifier is not recognized.
    """
    global _default_timezone

    if isinstance(timezone, str):
        timezone = resolve_timezone(timezone)
    if timezone is None:
        timezone = dateutil_tz.tzlocal()

    _default_timezone = timezone
    logger.debug(f"Default timezone set to {timezone}")
    return timezone


def zone_or_default(tz: Optional[tzinfo]) -> tzinfo:
    return tz if tz is not None else _default_timezone


def to_aware(millis: int, tz: tzinfo) -> datetime:
    """Timezone-aware datetime of an epoch-millisecond value in ``tz``."""
    return (EPOCH + timedelta(milliseconds=millis)).astimezone(tz)


def to_wall_clock(millis: int, tz: tzinfo) -> datetime:
    """Naive wall-clock datetime of an epoch-millisecond value in ``tz``."""
    return to_aware(millis, tz).replace(tzinfo=None)


def localize(wall: datetime, tz: tzinfo) -> datetime:
    """Attach ``tz`` to a naive wall-clock datetime.

    Wall-clock times inside a DST gap move forward by the gap length.
    Ambiguous times resolve to the earlier of the two offsets.

    Args:
        wall: Naive datetime.
        tz: pytz or standard-library timezone.

    Returns:
        Timezone-aware datetime.
    """
    if hasattr(tz, "localize"):
        try:
            return tz.localize(wall, is_dst=None)
        except pytz.exceptions.AmbiguousTimeError:
            return tz.localize(wall, is_dst=True)
        except pytz.exceptions.NonExistentTimeError:
            return tz.localize(wall, is_dst=False)

    return dateutil_tz.resolve_imaginary(wall.replace(tzinfo=tz, fold=0))


def to_epoch_millis(dt: datetime) -> int:
    """Convert a timezone-aware datetime to epoch milliseconds.

    Raises:
        ValueError: If datetime is naive.
    """
    if dt.tzinfo is None:
        raise ValueError("datetime must be timezone-aware")
    return (dt - EPOCH) // timedelta(milliseconds=1)
