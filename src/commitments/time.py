# SPDX-License-Identifier: MIT

import datetime
from typing import Any, Callable, Optional, TypeAlias, cast

import pendulum

Clock: TypeAlias = Callable[[], pendulum.DateTime]


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def fixed_clock(moment: pendulum.DateTime) -> Clock:
    """Return a clock that always reports the same instant."""
    return lambda: moment


def python_to_pendulum(python_value: datetime.datetime) -> pendulum.DateTime:
    # naive values are wall-clock times of the local machine
    return pendulum.instance(python_value, tz="local")


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_from_value(value: Any) -> pendulum.DateTime:
    """
    Revive an instant from a snapshot value.

    Accepts ISO 8601 strings as written by JSON.stringify, and the
    datetime/date objects PyYAML produces for unquoted timestamps.
    """
    if isinstance(value, pendulum.DateTime):
        return value
    if isinstance(value, datetime.datetime):
        return python_to_pendulum(value)
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz="local")
    if isinstance(value, str):
        return datetime_from_str(value)
    raise ValueError(f"Cannot read a timestamp from {value!r}")


def datetime_from_value_optional(value: Any) -> Optional[pendulum.DateTime]:
    if value is None:
        return None
    return datetime_from_value(value)


def date_from_value(value: Any, tz: str = "local") -> pendulum.Date:
    """
    Revive a calendar date from a snapshot value.

    Full timestamps are converted to ``tz`` before the date is taken, so a
    local midnight serialized as UTC lands back on the intended day.
    """
    if isinstance(value, datetime.datetime):
        return datetime_from_value(value).in_tz(tz).date()
    if isinstance(value, datetime.date):
        return pendulum.Date(value.year, value.month, value.day)
    if isinstance(value, str):
        parsed = pendulum.parse(value, exact=True)
        if isinstance(parsed, pendulum.DateTime):
            return parsed.in_tz(tz).date()
        if isinstance(parsed, pendulum.Date):
            return parsed
    raise ValueError(f"Cannot read a date from {value!r}")


def date_from_value_optional(value: Any, tz: str = "local") -> Optional[pendulum.Date]:
    if value is None or value == "":
        return None
    return date_from_value(value, tz)


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")


def date_to_display_str_optional(date: Optional[pendulum.Date]) -> str:
    if date is None:
        return ""
    return date_to_display_str(date)


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def datetime_to_display_local_datetime_str_optional(
    datetime: Optional[pendulum.DateTime],
) -> str:
    if datetime is None:
        return ""
    return datetime_to_display_local_datetime_str(datetime)
