# SPDX-License-Identifier: MIT

from typing import Iterable

import pendulum

from commitments.model.commitment import Commitment
from commitments.model.event import Event
from commitments.model.habit import Habit
from commitments.model.task import Task
from commitments.model.urgency import URGENCY_ORDER, Urgency
from commitments.service.day import DayContext
from commitments.service.habit import is_habit_active
from commitments.service.recurrence import next_event_date, next_habit_date
from commitments.service.review import is_review_due


def urgency_for_date(date: pendulum.Date, day: DayContext) -> Urgency:
    if date < day.today:
        return Urgency.URGENT
    if date == day.today:
        return Urgency.UPCOMING
    if date == day.tomorrow:
        return Urgency.TOMORROW
    return Urgency.NORMAL


def most_urgent(levels: Iterable[Urgency]) -> Urgency:
    return min(levels, key=URGENCY_ORDER.__getitem__, default=Urgency.NORMAL)


def task_urgency(task: Task, day: DayContext) -> Urgency:
    if task["completed"] or task["due_at"] is None:
        return Urgency.NORMAL
    return urgency_for_date(task["due_at"], day)


def habit_urgency(habit: Habit, day: DayContext) -> Urgency:
    if not is_habit_active(habit, day):
        return Urgency.NORMAL

    next_date = next_habit_date(habit, day)
    if next_date is None:
        return Urgency.NORMAL
    return urgency_for_date(next_date, day)


def event_urgency(event: Event, day: DayContext) -> Urgency:
    """
    Urgency of an event's next occurrence.

    A reminder that has gone off before the event takes place makes the event
    urgent regardless of how far away it is.
    """
    today = day.today
    relevant_date = next_event_date(event, today)
    if relevant_date is None:
        return Urgency.NORMAL

    reminder_time = event["reminder_time"]
    if (
        reminder_time is not None
        and reminder_time <= day.now
        and relevant_date >= today
    ):
        return Urgency.URGENT

    if relevant_date == today:
        return Urgency.UPCOMING
    if relevant_date == day.tomorrow:
        return Urgency.TOMORROW
    return Urgency.NORMAL


def commitment_urgency(commitment: Commitment, day: DayContext) -> Urgency:
    """An overdue review makes the whole commitment urgent."""
    if is_review_due(commitment, day):
        return Urgency.URGENT

    levels = [task_urgency(task, day) for task in commitment["sub_items"]["tasks"]]
    levels += [habit_urgency(habit, day) for habit in commitment["sub_items"]["habits"]]
    levels += [event_urgency(event, day) for event in commitment["events"]]
    return most_urgent(levels)
