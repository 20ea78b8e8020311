# SPDX-License-Identifier: MIT

from copy import deepcopy
from typing import Iterable, Optional

import pendulum

from commitments.model.commitment import Commitment, ReviewFrequency
from commitments.model.entity_id import EntityId
from commitments.service.day import DayContext
from commitments.service.habit import record_habit_entry
from commitments.template.note import get_note_template

DEFAULT_REVIEW_INTERVAL_DAYS = 7

REVIEW_FREQUENCY_LABELS: dict[int, str] = {
    1: "Daily",
    7: "Weekly",
    14: "Every two weeks",
    30: "Monthly",
    90: "Quarterly",
}


def review_interval_days(frequency: ReviewFrequency) -> int:
    if frequency["type"] == "interval":
        return frequency["interval_days"] or DEFAULT_REVIEW_INTERVAL_DAYS
    # TODO: evaluate custom_cron; custom schedules fall back to weekly until then
    return DEFAULT_REVIEW_INTERVAL_DAYS


def next_review_date(commitment: Commitment, day: DayContext) -> pendulum.DateTime:
    """
    When the commitment should next be reviewed.

    A commitment that was never reviewed is due at its first review date if one
    was set, and immediately otherwise.
    """
    last_reviewed_at = commitment["last_reviewed_at"]
    if last_reviewed_at is None:
        first_review_date = commitment["first_review_date"]
        if first_review_date is not None:
            return first_review_date
        return day.now

    return last_reviewed_at.add(
        days=review_interval_days(commitment["review_frequency"])
    )


def is_review_due(commitment: Commitment, day: DayContext) -> bool:
    return next_review_date(commitment, day) <= day.now


def review_frequency_text(commitment: Commitment) -> str:
    frequency = commitment["review_frequency"]
    if frequency["type"] != "interval":
        return "Custom schedule"
    days = review_interval_days(frequency)
    return REVIEW_FREQUENCY_LABELS.get(days, f"Every {days} days")


def complete_review(
    commitment: Commitment,
    day: DayContext,
    completed_task_ids: Iterable[EntityId],
    habit_check_ins: Iterable[EntityId],
    note_content: Optional[str] = None,
) -> Commitment:
    """
    Apply the outcome of a review and return the updated commitment.

    Task completion is taken from ``completed_task_ids`` (tasks not listed are
    left incomplete), every habit in ``habit_check_ins`` is checked in for
    today, a non-blank ``note_content`` is added as a note, and the review
    timestamp moves to now.
    """
    completed = set(completed_task_ids)
    checked_in = set(habit_check_ins)

    reviewed = deepcopy(commitment)
    for task in reviewed["sub_items"]["tasks"]:
        task["completed"] = task["id"] in completed

    reviewed["sub_items"]["habits"] = [
        record_habit_entry(habit, day.now, day) if habit["id"] in checked_in else habit
        for habit in reviewed["sub_items"]["habits"]
    ]

    if note_content is not None and note_content.strip() != "":
        note = get_note_template()
        note["content"] = note_content.strip()
        note["timestamp"] = day.now
        reviewed["notes"].append(note)

    reviewed["last_reviewed_at"] = day.now
    return reviewed
