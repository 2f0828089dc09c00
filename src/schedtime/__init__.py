"""Calendar and time arithmetic for the workflow scheduler.

Converts between epoch timestamps, formatted strings and calendar-aware
instants, and computes durations, offsets and timezone-shifted instants
used for trigger times, duration display and audit timestamps.
"""

__version__ = "0.1.0"

from .durations import (
    Duration,
    decompose_duration,
    diff_hours,
    diff_minutes,
    differ_millis,
    differ_seconds,
    format_duration,
    format_duration_between,
    format_readable,
)
from .errors import InvalidArgument, InvalidPattern, UnknownTimezone
from .formatting import (
    DEFAULT_PATTERN,
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
from .instant import CalendarField, Instant
from .navigation import (
    add_days,
    add_field,
    add_hours,
    add_milliseconds,
    add_minutes,
    add_months,
    add_seconds,
    add_weeks,
    add_years,
    get_end_of_day,
    get_end_of_hour,
    get_first_day_of_month,
    get_hour_index,
    get_last_day_of_month,
    get_monday,
    get_some_day,
    get_some_hour_of_day,
    get_start_of_day,
    get_start_of_hour,
    get_sunday,
)
from .utils.time_utils import get_default_timezone, set_default_timezone
from .zones import convert_timezone, is_after, remaining_seconds, resolve_timezone

__all__ = [
    "CalendarField",
    "DEFAULT_PATTERN",
    "Duration",
    "Instant",
    "InvalidArgument",
    "InvalidPattern",
    "UnknownTimezone",
    "add_days",
    "add_field",
    "add_hours",
    "add_milliseconds",
    "add_minutes",
    "add_months",
    "add_seconds",
    "add_weeks",
    "add_years",
    "convert_timezone",
    "date_to_string",
    "decompose_duration",
    "diff_hours",
    "diff_minutes",
    "differ_millis",
    "differ_seconds",
    "format_date",
    "format_duration",
    "format_duration_between",
    "format_readable",
    "format_timestamp",
    "get_current_date",
    "get_current_time",
    "get_current_timestamp",
    "get_default_timezone",
    "get_end_of_day",
    "get_end_of_hour",
    "get_first_day_of_month",
    "get_hour_index",
    "get_last_day_of_month",
    "get_monday",
    "get_schedule_date",
    "get_some_day",
    "get_some_hour_of_day",
    "get_start_of_day",
    "get_start_of_hour",
    "get_sunday",
    "is_after",
    "parse",
    "remaining_seconds",
    "resolve_timezone",
    "set_default_timezone",
    "string_to_date",
]
