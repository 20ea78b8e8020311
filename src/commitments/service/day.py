# SPDX-License-Identifier: MIT

from typing import Optional, Union

import pendulum

from commitments.time import Clock, now_utc

# Offsets in Sunday-first weekday numbering (Sunday = 0)
WEEK_START_INDEX: dict[str, int] = {"sunday": 0, "monday": 1}

DateLike = Union[pendulum.Date, pendulum.DateTime]


class DayContext:
    """
    Logical calendar days for one computation pass.

    A logical day begins at ``day_start_hour`` rather than at midnight, so with
    ``day_start_hour=6`` a check-in at 03:00 still belongs to the previous day.
    ``now`` is captured once at construction; every "today" the engine uses
    comes from here so a single pass never straddles two days.
    """

    def __init__(
        self,
        now: pendulum.DateTime,
        day_start_hour: int = 0,
        week_start: str = "sunday",
        tz: str = "local",
    ) -> None:
        if not 0 <= day_start_hour <= 23:
            raise ValueError(
                f"day_start_hour must be between 0 and 23, got {day_start_hour}"
            )
        if week_start not in WEEK_START_INDEX:
            raise ValueError(
                f"week_start must be one of {', '.join(WEEK_START_INDEX)}, got {week_start}"
            )
        self.tz = tz
        self.day_start_hour = day_start_hour
        self.week_start = week_start
        self.now = now.in_tz(tz)

    @classmethod
    def from_clock(
        cls,
        clock: Clock = now_utc,
        day_start_hour: int = 0,
        week_start: str = "sunday",
        tz: str = "local",
    ) -> "DayContext":
        return cls(clock(), day_start_hour=day_start_hour, week_start=week_start, tz=tz)

    @property
    def today(self) -> pendulum.Date:
        return self.date_of(self.now)

    @property
    def tomorrow(self) -> pendulum.Date:
        return self.today.add(days=1)

    def date_of(self, value: DateLike) -> pendulum.Date:
        """Logical calendar date of an instant. Plain dates pass through."""
        if not isinstance(value, pendulum.DateTime):
            return pendulum.Date(value.year, value.month, value.day)
        local = value.in_tz(self.tz)
        if local.hour < self.day_start_hour:
            local = local.subtract(days=1)
        return local.date()

    def start_of(self, date: pendulum.Date) -> pendulum.DateTime:
        """Instant at which the logical day ``date`` begins."""
        return pendulum.datetime(
            date.year, date.month, date.day, self.day_start_hour, tz=self.tz
        )

    def get_start_of_day(self, value: Optional[DateLike] = None) -> pendulum.DateTime:
        return self.start_of(self.date_of(self.now if value is None else value))

    def is_same_day(self, first: DateLike, second: DateLike) -> bool:
        return self.date_of(first) == self.date_of(second)

    def get_tomorrow(self) -> pendulum.DateTime:
        return self.get_start_of_day().add(days=1)

    def is_today(self, value: DateLike) -> bool:
        return self.is_same_day(value, self.now)

    def start_of_week(self, date: pendulum.Date) -> pendulum.Date:
        weekday = date.isoweekday() % 7
        return date.subtract(days=(weekday - WEEK_START_INDEX[self.week_start]) % 7)

    def start_of_month(self, date: pendulum.Date) -> pendulum.Date:
        return date.start_of("month")
