# SPDX-License-Identifier: MIT

from typing import Optional

from commitments.model.entity_id import generate_entity_id
from commitments.model.habit import Habit
from commitments.service.day import DayContext


def get_habit_template(day: Optional[DayContext] = None) -> Habit:
    if day is None:
        day = DayContext.from_clock()
    return {
        "id": generate_entity_id(),
        "title": "",
        "schedule": "daily",
        "history": {},
        "target": {"kind": "none"},
        "start_on": day.today,
        "end_on": None,
    }
