# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional

import pendulum

from commitments.model.habit import Habit, HabitEntryValue, HabitTarget
from commitments.service.day import DateLike, DayContext
from commitments.time import datetime_from_value

logger = logging.getLogger(__name__)

RECENT_ACTIVITY_DAYS = 30


def history_key(date: pendulum.Date) -> str:
    return date.to_date_string()


def convert_legacy_habit_history(
    raw_habit: dict[str, Any], tz: str = "local"
) -> dict[str, Any]:
    """
    Upgrade a habit whose history is a flat list of completion dates.

    Every listed date becomes a completed entry with no value, keyed by its
    calendar day. Habits already using the keyed form are returned as is.
    """
    history = raw_habit.get("history")
    if not isinstance(history, list):
        return raw_habit

    converted: dict[str, Any] = {}
    for value in history:
        moment = datetime_from_value(value)
        converted[history_key(moment.in_tz(tz).date())] = {
            "date": moment,
            "value": None,
            "completed": True,
        }

    logger.info(
        "converted legacy history of habit %s (%d entries)",
        raw_habit.get("id"),
        len(converted),
    )

    upgraded = dict(raw_habit)
    upgraded["history"] = converted
    upgraded.setdefault("target", None)
    return upgraded


def default_entry_value(target: HabitTarget) -> HabitEntryValue:
    """Value recorded for a check-in when the caller does not give one."""
    if target["kind"] == "numeric":
        return target["amount"]
    if target["kind"] == "checklist":
        return list(target["items"])
    return None


def format_entry_value(value: HabitEntryValue) -> str:
    if value is None:
        return "✓"
    if isinstance(value, list):
        return ", ".join(value)
    return f"{value:g}"


def completed_dates(habit: Habit, day: DayContext) -> list[pendulum.Date]:
    return sorted(
        {
            day.date_of(entry["date"])
            for entry in habit["history"].values()
            if entry["completed"]
        }
    )


def _find_entry_key(habit: Habit, date: pendulum.Date, day: DayContext) -> Optional[str]:
    for key, entry in habit["history"].items():
        if day.date_of(entry["date"]) == date:
            return key
    return None


def is_completed_for_date(habit: Habit, date: DateLike, day: DayContext) -> bool:
    return day.date_of(date) in completed_dates(habit, day)


def can_toggle_date(date: DateLike, day: DayContext) -> bool:
    """Only the logical today can be checked in or out."""
    return day.is_today(date)


def record_habit_entry(
    habit: Habit,
    at: pendulum.DateTime,
    day: DayContext,
    value: HabitEntryValue = None,
) -> Habit:
    """Return a copy of ``habit`` completed on the logical day of ``at``."""
    updated = deepcopy(habit)
    date = day.date_of(at)

    existing_key = _find_entry_key(updated, date, day)
    if existing_key is not None:
        del updated["history"][existing_key]

    updated["history"][history_key(date)] = {
        "date": at,
        "value": value if value is not None else default_entry_value(habit["target"]),
        "completed": True,
    }
    return updated


def toggle_habit_entry(
    habit: Habit,
    at: pendulum.DateTime,
    day: DayContext,
    value: HabitEntryValue = None,
) -> Habit:
    """
    Return a copy of ``habit`` with the check-in for the logical day of ``at``
    flipped: an existing entry is removed, otherwise a completed one is added.
    """
    existing_key = _find_entry_key(habit, day.date_of(at), day)
    if existing_key is None:
        return record_habit_entry(habit, at, day, value)

    updated = deepcopy(habit)
    del updated["history"][existing_key]
    return updated


def is_habit_active(habit: Habit, day: DayContext) -> bool:
    today = day.today
    has_started = habit["start_on"] <= today
    has_ended = habit["end_on"] is not None and today > habit["end_on"]
    return has_started and not has_ended


def calculate_streak(habit: Habit, day: DayContext) -> int:
    """
    Consecutive completed days of a daily habit.

    The streak has to reach today or yesterday; an older most recent
    completion means it is broken.
    """
    if habit["schedule"] != "daily":
        return 0

    dates = sorted(completed_dates(habit, day), reverse=True)
    if len(dates) == 0:
        return 0

    today = day.today
    if dates[0] != today and dates[0] != today.subtract(days=1):
        return 0

    streak = 1
    for current, previous in zip(dates, dates[1:]):
        if previous.add(days=1) != current:
            break
        streak += 1
    return streak


def recently_active_habits(
    habits: list[Habit],
    day: DayContext,
    days: int = RECENT_ACTIVITY_DAYS,
) -> list[Habit]:
    """Habits with at least one completion in the last ``days`` days."""
    cutoff = day.today.subtract(days=days)
    recent = []
    for habit in habits:
        dates = completed_dates(habit, day)
        if dates and dates[-1] >= cutoff:
            recent.append(habit)
    return recent
