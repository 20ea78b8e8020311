# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, Union

import pendulum

from commitments.model.entity_id import EntityId

Schedule = Literal["daily", "weekly", "monthly"]

SCHEDULES: tuple[Schedule, ...] = ("daily", "weekly", "monthly")


class NoTarget(TypedDict):
    kind: Literal["none"]


class NumericTarget(TypedDict):
    kind: Literal["numeric"]
    amount: float


class ChecklistTarget(TypedDict):
    kind: Literal["checklist"]
    items: list[str]


# Simple checkbox, numeric goal, or multi-item checklist
HabitTarget = Union[NoTarget, NumericTarget, ChecklistTarget]

# None for a plain check-in, otherwise shaped like the habit's target
HabitEntryValue = Optional[Union[int, float, list[str]]]


class HabitEntry(TypedDict):
    date: pendulum.DateTime  # moment the check-in was recorded
    value: HabitEntryValue
    completed: bool


class Habit(TypedDict):
    id: EntityId
    title: str
    schedule: Schedule
    # Keyed by "YYYY-MM-DD", at most one entry per day
    history: dict[str, HabitEntry]
    target: HabitTarget
    start_on: pendulum.Date
    end_on: Optional[pendulum.Date]
