# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from commitments.model.event import Event
from commitments.model.habit import Habit
from commitments.service.day import DayContext

logger = logging.getLogger(__name__)


def current_period_start(
    schedule: str, today: pendulum.Date, day: DayContext
) -> Optional[pendulum.Date]:
    """
    First day of the period a habit check-in counts towards.

    - daily: today
    - weekly: start of the current week (Sunday unless configured otherwise)
    - monthly: first of the month

    Returns None for an unknown schedule.
    """
    if schedule == "daily":
        return today
    if schedule == "weekly":
        return day.start_of_week(today)
    if schedule == "monthly":
        return day.start_of_month(today)
    return None


def next_period_start(
    schedule: str, today: pendulum.Date, day: DayContext
) -> Optional[pendulum.Date]:
    if schedule == "daily":
        return today.add(days=1)
    if schedule == "weekly":
        return day.start_of_week(today).add(weeks=1)
    if schedule == "monthly":
        # pendulum clamps to the last day of shorter months
        return today.add(months=1)
    return None


def is_completed_in_period(
    habit: Habit,
    period_start: pendulum.Date,
    today: pendulum.Date,
    day: DayContext,
) -> bool:
    for entry in habit["history"].values():
        if not entry["completed"]:
            continue
        if period_start <= day.date_of(entry["date"]) <= today:
            return True
    return False


def next_habit_date(
    habit: Habit,
    day: DayContext,
    today: Optional[pendulum.Date] = None,
) -> Optional[pendulum.Date]:
    """
    Date on which a habit is next due, or None when nothing is due anymore.

    A habit that has not started is due on its start date. Otherwise it is due
    today unless it was already completed in the current period, in which case
    it is due when the next period begins.
    """
    if today is None:
        today = day.today

    if habit["start_on"] > today:
        return habit["start_on"]

    end_on = habit["end_on"]
    if end_on is not None and end_on < today:
        return None

    period_start = current_period_start(habit["schedule"], today, day)
    next_start = next_period_start(habit["schedule"], today, day)
    if period_start is None or next_start is None:
        logger.debug(
            "habit %s has unknown schedule %r, treating as never due",
            habit["id"],
            habit["schedule"],
        )
        return None

    if not is_completed_in_period(habit, period_start, today, day):
        return today

    if end_on is not None and next_start > end_on:
        return None

    return next_start


def next_event_date(event: Event, today: pendulum.Date) -> Optional[pendulum.Date]:
    """
    Next occurrence of an event on or after ``today``.

    One-off events always report their own date, past or future. Recurring
    events report the first occurrence not before ``today``, or None once
    their ``end_on`` has passed.
    """
    schedule = event["schedule"]
    if schedule is None:
        return event["date"]

    end_on = event["end_on"]
    if end_on is not None and end_on < today:
        return None

    event_date = event["date"]
    if event_date >= today:
        return event_date

    if schedule == "daily":
        next_date = event_date.add(days=event_date.diff(today).in_days())
    elif schedule == "weekly":
        next_date = event_date
        while next_date < today:
            next_date = next_date.add(weeks=1)
    elif schedule == "monthly":
        # Anchored on the original day-of-month, clamped per target month
        months = 0
        next_date = event_date
        while next_date < today:
            months += 1
            next_date = event_date.add(months=months)
    else:
        logger.debug(
            "event %s has unknown schedule %r, treating as never due",
            event["id"],
            schedule,
        )
        return None

    if end_on is not None and next_date > end_on:
        return None

    return next_date


def relevant_event_date(event: Event, today: pendulum.Date) -> pendulum.Date:
    """Date an event is ranked by: its next occurrence, else its own date."""
    next_date = next_event_date(event, today)
    if next_date is None:
        return event["date"]
    return next_date
