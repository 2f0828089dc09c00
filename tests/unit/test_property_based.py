"""Property-Based Tests for calendar arithmetic.

Uses Hypothesis to verify invariants hold across wide input ranges.

Tests verify:
- Default-pattern round trip at second granularity
- Differences are symmetric
- Duration decomposition reassembles to the input
- Monday/Sunday bracket the date six days apart
- Last day of month is followed by the first of the next
"""

import pytest
import pytz
from hypothesis import given, settings, strategies as st

from schedtime import (
    Instant,
    add_days,
    date_to_string,
    decompose_duration,
    differ_millis,
    format_duration,
    format_readable,
    get_last_day_of_month,
    get_monday,
    get_sunday,
    string_to_date,
)

# No DST since 1970, so wall-clock round trips are exact
TOKYO = pytz.timezone("Asia/Tokyo")

# 1970-01-01 .. 2100-01-01
MAX_MILLIS = 4_102_444_800_000


# ============================================================================
# Custom Strategies
# ============================================================================


@st.composite
def instants(draw):
    """Instants between the epoch and 2100."""
    return Instant(draw(st.integers(min_value=0, max_value=MAX_MILLIS)))


@st.composite
def whole_second_instants(draw):
    return Instant(draw(st.integers(min_value=0, max_value=MAX_MILLIS // 1000)) * 1000)


durations = st.integers(min_value=0, max_value=400 * 86_400_000)


# ============================================================================
# Formatting
# ============================================================================


@given(whole_second_instants())
def test_default_pattern_round_trip(instant):
    assert string_to_date(date_to_string(instant, tz=TOKYO), tz=TOKYO) == instant


@given(instants())
def test_round_trip_truncates_to_second(instant):
    parsed = string_to_date(date_to_string(instant, tz=TOKYO), tz=TOKYO)
    assert parsed.millis == instant.millis - instant.millis % 1000


# ============================================================================
# Durations
# ============================================================================


@given(instants(), instants())
def test_differ_millis_symmetric(a, b):
    assert differ_millis(a, b) == differ_millis(b, a) >= 0


@given(durations)
def test_decomposition_bounds(millis):
    d = decompose_duration(millis)
    total = d.days * 86_400_000 + d.hours * 3_600_000 + d.minutes * 60_000 + d.seconds * 1000

    assert total <= millis < total + 1000
    assert 0 <= d.hours < 24
    assert 0 <= d.minutes < 60
    assert 0 <= d.seconds < 60


@given(durations)
def test_duration_renderings(millis):
    compact = format_duration(millis)

    assert not compact.endswith(" ")
    assert not compact.startswith(" ")
    assert (compact == "") == (millis < 1000)
    assert format_readable(millis)[-9:-6] in {f" {h:02d}" for h in range(24)}


# ============================================================================
# Navigation
# ============================================================================


@given(instants())
@settings(max_examples=200)
def test_monday_and_sunday_bracket_date(instant):
    monday = get_monday(instant, tz=TOKYO)
    sunday = get_sunday(instant, tz=TOKYO)

    assert sunday.millis - monday.millis == 6 * 86_400_000
    assert monday <= instant <= sunday
    assert monday.wall_clock(TOKYO).weekday() == 0
    assert sunday.wall_clock(TOKYO).weekday() == 6


@given(instants())
def test_last_day_of_month_precedes_first(instant):
    last = get_last_day_of_month(instant, tz=TOKYO)
    wall = instant.wall_clock(TOKYO)

    assert last.wall_clock(TOKYO).month == wall.month
    assert add_days(last, 1, tz=TOKYO).wall_clock(TOKYO).day == 1
    assert last.wall_clock(TOKYO).time() == wall.time()


@pytest.mark.parametrize("year,expected", [(2020, 29), (2021, 28), (2000, 29), (2100, 28)])
def test_february_length(year, expected):
    mid_february = string_to_date(f"{year}-02-15 12:00:00", tz=TOKYO)
    assert get_last_day_of_month(mid_february, tz=TOKYO).wall_clock(TOKYO).day == expected
