"""Instant value type and calendar field selectors."""

import time
from dataclasses import dataclass
from datetime import datetime, tzinfo
from enum import Enum
from typing import Optional

from .errors import InvalidArgument
from .utils.time_utils import (
    localize,
    to_aware,
    to_epoch_millis,
    to_wall_clock,
    zone_or_default,
)


class CalendarField(str, Enum):
    """Calendar field used as an arithmetic unit."""

    YEAR = "year"
    MONTH = "month"
    WEEK = "week"
    DAY = "day"
    HOUR = "hour"
    MINUTE = "minute"
    SECOND = "second"
    MILLISECOND = "millisecond"


@dataclass(frozen=True, order=True)
class Instant:
    """Point in time as milliseconds since the Unix epoch.

    Instants carry no timezone. Wall-clock views are produced on demand for
    a given zone, or the process default zone when none is given.

    Attributes:
        millis: Milliseconds since 1970-01-01T00:00:00Z.
    """

    millis: int

    def __post_init__(self) -> None:
        if isinstance(self.millis, bool) or not isinstance(self.millis, int):
            raise InvalidArgument(f"millis must be an int, got {type(self.millis).__name__}")

    @classmethod
    def now(cls) -> "Instant":
        """Current wall-clock time."""
        return cls(time.time_ns() // 1_000_000)

    @classmethod
    def from_datetime(cls, dt: datetime, tz: Optional[tzinfo] = None) -> "Instant":
        """Build an instant from a datetime.

        Args:
            dt: Aware datetime, or naive wall-clock datetime.
            tz: Zone a naive ``dt`` is read in (default zone if None).

        Returns:
            Instant truncated to millisecond precision.
        """
        if dt.tzinfo is None:
            dt = localize(dt, zone_or_default(tz))
        return cls(to_epoch_millis(dt))

    def to_datetime(self, tz: Optional[tzinfo] = None) -> datetime:
        """Timezone-aware datetime in ``tz`` (default zone if None)."""
        return to_aware(self.millis, zone_or_default(tz))

    def wall_clock(self, tz: Optional[tzinfo] = None) -> datetime:
        """Naive wall-clock fields of this instant in ``tz``."""
        return to_wall_clock(self.millis, zone_or_default(tz))
