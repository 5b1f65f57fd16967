"""Wall-clock time and date values as shown next to tweets and replies."""

from __future__ import annotations

import datetime as _dt
from dataclasses import dataclass


@dataclass(frozen=True)
class Time:
    """A time of day with hour, minute and second."""

    hour: int
    minute: int
    second: int

    def __str__(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


@dataclass(frozen=True)
class DateTime:
    """A calendar date together with a time of day."""

    day: int
    month: int
    year: int
    time: Time

    def __str__(self) -> str:
        return f"{self.day:02d}/{self.month:02d}/{self.year:04d} {self.time}"

    @classmethod
    def now(cls) -> DateTime:
        """Return the current local date and time, to the second."""
        moment = _dt.datetime.now()
        return cls(
            day=moment.day,
            month=moment.month,
            year=moment.year,
            time=Time(moment.hour, moment.minute, moment.second),
        )