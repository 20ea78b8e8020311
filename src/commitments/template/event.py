# SPDX-License-Identifier: MIT

from typing import Optional

from commitments.model.entity_id import generate_entity_id
from commitments.model.event import Event
from commitments.service.day import DayContext


def get_event_template(day: Optional[DayContext] = None) -> Event:
    if day is None:
        day = DayContext.from_clock()
    return {
        "id": generate_entity_id(),
        "title": "",
        "date": day.today,
        "time": None,
        "is_all_day": True,
        "location": None,
        "description": None,
        "reminder_time": None,
        "schedule": None,
        "end_on": None,
    }
