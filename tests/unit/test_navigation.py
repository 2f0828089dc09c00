"""Test calendar navigation."""

import pytest

from schedtime import (
    CalendarField,
    Instant,
    InvalidArgument,
    add_days,
    add_field,
    add_hours,
    add_milliseconds,
    add_minutes,
    add_months,
    add_seconds,
    add_weeks,
    add_years,
    differ_millis,
    format_timestamp,
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
    parse,
)

FULL_PATTERN = "yyyy-MM-dd HH:mm:ss.SSS"


def at(text: str, tz=None) -> Instant:
    return parse(text, FULL_PATTERN, tz=tz)


def show(instant: Instant, tz=None) -> str:
    return format_timestamp(instant.millis, FULL_PATTERN, tz=tz)


# Wednesday
MID_WEEK = "2024-05-15 10:20:30.456"


def test_get_monday_and_sunday_keep_time_of_day():
    date = at(MID_WEEK)

    assert show(get_monday(date)) == "2024-05-13 10:20:30.456"
    assert show(get_sunday(date)) == "2024-05-19 10:20:30.456"


def test_week_starts_on_monday():
    sunday = at("2024-05-19 08:00:00.000")
    monday = at("2024-05-13 08:00:00.000")

    assert show(get_monday(sunday)) == "2024-05-13 08:00:00.000"
    assert show(get_sunday(sunday)) == "2024-05-19 08:00:00.000"
    assert show(get_monday(monday)) == "2024-05-13 08:00:00.000"
    assert show(get_sunday(monday)) == "2024-05-19 08:00:00.000"


def test_monday_to_sunday_is_six_days():
    date = at(MID_WEEK)
    assert get_sunday(date).millis - get_monday(date).millis == 6 * 86_400_000


def test_first_day_of_month_keeps_time_of_day():
    assert show(get_first_day_of_month(at(MID_WEEK))) == "2024-05-01 10:20:30.456"


@pytest.mark.parametrize(
    "text,expected",
    [
        ("2020-02-15 12:00:00.000", "2020-02-29 12:00:00.000"),
        ("2021-02-15 12:00:00.000", "2021-02-28 12:00:00.000"),
        ("2024-01-31 06:30:00.000", "2024-01-31 06:30:00.000"),
        ("2023-12-10 00:00:00.000", "2023-12-31 00:00:00.000"),
        ("2023-04-01 23:59:59.999", "2023-04-30 23:59:59.999"),
    ],
)
def test_last_day_of_month(text, expected):
    assert show(get_last_day_of_month(at(text))) == expected


def test_day_and_hour_boundaries():
    date = at(MID_WEEK)

    assert show(get_start_of_day(date)) == "2024-05-15 00:00:00.000"
    assert show(get_end_of_day(date)) == "2024-05-15 23:59:59.999"
    assert show(get_start_of_hour(date)) == "2024-05-15 10:00:00.000"
    assert show(get_end_of_hour(date)) == "2024-05-15 10:59:59.999"


def test_add_family():
    date = at(MID_WEEK)

    assert show(add_years(date, 1)) == "2025-05-15 10:20:30.456"
    assert show(add_months(date, -5)) == "2023-12-15 10:20:30.456"
    assert show(add_weeks(date, 2)) == "2024-05-29 10:20:30.456"
    assert show(add_days(date, -15)) == "2024-04-30 10:20:30.456"
    assert show(add_hours(date, 14)) == "2024-05-16 00:20:30.456"
    assert show(add_minutes(date, 40)) == "2024-05-15 11:00:30.456"
    assert show(add_seconds(date, -31)) == "2024-05-15 10:19:59.456"
    assert show(add_milliseconds(date, 544)) == "2024-05-15 10:20:31.000"


def test_add_months_clamps_day_of_month():
    assert show(add_months(at("2024-01-31 09:00:00.000"), 1)) == "2024-02-29 09:00:00.000"
    assert show(add_years(at("2024-02-29 09:00:00.000"), 1)) == "2025-02-28 09:00:00.000"


def test_add_field_accepts_field_name():
    date = at(MID_WEEK)
    assert add_field(date, "day", 1) == add_field(date, CalendarField.DAY, 1)


def test_add_field_rejects_absent_date():
    with pytest.raises(InvalidArgument, match="must not be None"):
        add_field(None, CalendarField.DAY, 1)

    with pytest.raises(InvalidArgument):
        add_days(None, 1)


def test_add_field_rejects_unknown_field():
    with pytest.raises(InvalidArgument, match="Unsupported calendar field"):
        add_field(at(MID_WEEK), "fortnight", 1)


def test_navigation_rejects_absent_date():
    for operation in (get_monday, get_sunday, get_start_of_day, get_last_day_of_month, get_hour_index):
        with pytest.raises(InvalidArgument):
            operation(None)


def test_get_some_day():
    date = at(MID_WEEK)

    assert show(get_some_day(date, -3)) == "2024-05-12 10:20:30.456"
    assert show(get_some_day(date, 20)) == "2024-06-04 10:20:30.456"


def test_get_some_hour_of_day_rolls_over_days():
    late = at("2024-05-15 22:20:30.456")

    assert show(get_some_hour_of_day(late, 3)) == "2024-05-16 01:00:00.000"
    assert show(get_some_hour_of_day(late, 0)) == "2024-05-15 22:00:00.000"
    assert show(get_some_hour_of_day(late, -23)) == "2024-05-14 23:00:00.000"


def test_get_hour_index():
    assert get_hour_index(at(MID_WEEK)) == 10
    assert get_hour_index(at("2024-05-15 00:59:00.000")) == 0


def test_calendar_days_keep_wall_clock_across_dst(new_york):
    before_gap = at("2020-03-07 12:00:00.000", tz=new_york)

    next_day = add_days(before_gap, 1, tz=new_york)

    assert show(next_day, tz=new_york) == "2020-03-08 12:00:00.000"
    assert differ_millis(before_gap, next_day) == 23 * 3_600_000
    assert show(add_hours(before_gap, 24), tz=new_york) == "2020-03-08 13:00:00.000"


def test_boundaries_in_explicit_zone(new_york):
    date = at("2020-03-08 12:00:00.000", tz=new_york)

    assert show(get_start_of_day(date, tz=new_york), tz=new_york) == "2020-03-08 00:00:00.000"
    assert show(get_monday(date, tz=new_york), tz=new_york) == "2020-03-02 12:00:00.000"
    assert get_hour_index(date, tz=new_york) == 12
