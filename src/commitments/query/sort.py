# SPDX-License-Identifier: MIT

from functools import cmp_to_key
from typing import Any

from commitments.model.commitment import Commitment
from commitments.model.event import Event
from commitments.model.habit import SCHEDULES, Habit
from commitments.model.task import Task
from commitments.model.urgency import URGENCY_ORDER
from commitments.service.day import DayContext
from commitments.service.habit import is_habit_active
from commitments.service.recurrence import next_habit_date, relevant_event_date
from commitments.service.review import is_review_due
from commitments.service.timeline import most_urgent_date
from commitments.service.urgency import (
    commitment_urgency,
    event_urgency,
    habit_urgency,
    task_urgency,
)

# daily before weekly before monthly; unknown schedules last
SCHEDULE_ORDER: dict[str, int] = {
    schedule: index for index, schedule in enumerate(SCHEDULES)
}


def _compare(a: Any, b: Any) -> int:
    return (a > b) - (a < b)


def compare_tasks_by_urgency(a: Task, b: Task, day: DayContext) -> int:
    """
    Completed tasks last, then by urgency, then by earliest due date.
    Tasks with a due date come before those without.
    """
    if a["completed"] != b["completed"]:
        return 1 if a["completed"] else -1

    a_urgency = task_urgency(a, day)
    b_urgency = task_urgency(b, day)
    if a_urgency != b_urgency:
        return _compare(URGENCY_ORDER[a_urgency], URGENCY_ORDER[b_urgency])

    a_due = a["due_at"]
    b_due = b["due_at"]
    if a_due is not None and b_due is not None:
        return _compare(a_due, b_due)
    if a_due is not None:
        return -1
    if b_due is not None:
        return 1
    return 0


def compare_habits_by_urgency(a: Habit, b: Habit, day: DayContext) -> int:
    """
    Active habits first. Inactive habits that have not started yet come
    before ended ones; the former by soonest start, the latter by most
    recent end. Active habits go by urgency, then next due date, with
    same-day ties broken daily < weekly < monthly. Habits without a next
    due date sort last.
    """
    today = day.today
    a_active = is_habit_active(a, day)
    b_active = is_habit_active(b, day)
    if a_active != b_active:
        return -1 if a_active else 1

    if not a_active:
        a_pending = a["start_on"] > today
        b_pending = b["start_on"] > today
        if a_pending != b_pending:
            return -1 if a_pending else 1
        if a_pending:
            return _compare(a["start_on"], b["start_on"])
        a_end = a["end_on"]
        b_end = b["end_on"]
        if a_end is not None and b_end is not None:
            return _compare(b_end, a_end)

    a_urgency = habit_urgency(a, day)
    b_urgency = habit_urgency(b, day)
    if a_urgency != b_urgency:
        return _compare(URGENCY_ORDER[a_urgency], URGENCY_ORDER[b_urgency])

    a_next = next_habit_date(a, day, today)
    b_next = next_habit_date(b, day, today)
    if a_next is None and b_next is None:
        return 0
    if a_next is None:
        return 1
    if b_next is None:
        return -1

    if a_next == b_next:
        return _compare(
            SCHEDULE_ORDER.get(a["schedule"], len(SCHEDULE_ORDER)),
            SCHEDULE_ORDER.get(b["schedule"], len(SCHEDULE_ORDER)),
        )
    return _compare(a_next, b_next)


def compare_events_by_urgency(
    a: Event, b: Event, day: DayContext, is_past_view: bool = False
) -> int:
    """
    Past views list the most recent event first. Otherwise events go by
    urgency, then by their next occurrence.
    """
    today = day.today
    a_date = relevant_event_date(a, today)
    b_date = relevant_event_date(b, today)

    if is_past_view:
        return _compare(b_date, a_date)

    a_urgency = event_urgency(a, day)
    b_urgency = event_urgency(b, day)
    if a_urgency != b_urgency:
        return _compare(URGENCY_ORDER[a_urgency], URGENCY_ORDER[b_urgency])

    return _compare(a_date, b_date)


def compare_commitments_by_urgency(
    a: Commitment, b: Commitment, day: DayContext
) -> int:
    """
    By urgency, then by the date of each commitment's closest timeline item.
    Remaining ties go to an overdue review first, then to the most recently
    reviewed commitment.
    """
    a_urgency = commitment_urgency(a, day)
    b_urgency = commitment_urgency(b, day)
    if a_urgency != b_urgency:
        return _compare(URGENCY_ORDER[a_urgency], URGENCY_ORDER[b_urgency])

    a_date = most_urgent_date(a, day)
    b_date = most_urgent_date(b, day)
    if a_date is not None and b_date is not None:
        if a_date != b_date:
            return _compare(a_date, b_date)
    elif a_date is not None:
        return -1
    elif b_date is not None:
        return 1

    a_review_due = is_review_due(a, day)
    b_review_due = is_review_due(b, day)
    if a_review_due != b_review_due:
        return -1 if a_review_due else 1

    a_reviewed = a["last_reviewed_at"]
    b_reviewed = b["last_reviewed_at"]
    if a_reviewed is not None and b_reviewed is not None:
        return _compare(b_reviewed, a_reviewed)
    return 0


def sort_tasks(tasks: list[Task], day: DayContext) -> list[Task]:
    return sorted(tasks, key=cmp_to_key(lambda a, b: compare_tasks_by_urgency(a, b, day)))


def sort_habits(habits: list[Habit], day: DayContext) -> list[Habit]:
    return sorted(
        habits, key=cmp_to_key(lambda a, b: compare_habits_by_urgency(a, b, day))
    )


def sort_events(
    events: list[Event], day: DayContext, is_past_view: bool = False
) -> list[Event]:
    return sorted(
        events,
        key=cmp_to_key(
            lambda a, b: compare_events_by_urgency(a, b, day, is_past_view)
        ),
    )


def sort_commitments(commitments: list[Commitment], day: DayContext) -> list[Commitment]:
    return sorted(
        commitments,
        key=cmp_to_key(lambda a, b: compare_commitments_by_urgency(a, b, day)),
    )
