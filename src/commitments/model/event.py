# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from commitments.model.entity_id import EntityId
from commitments.model.habit import Schedule


class Event(TypedDict):
    id: EntityId
    title: str
    date: pendulum.Date  # first occurrence for recurring events
    time: Optional[str]  # "HH:mm", display only
    is_all_day: bool
    location: Optional[str]
    description: Optional[str]
    reminder_time: Optional[pendulum.DateTime]
    schedule: Optional[Schedule]  # one-off event when None
    end_on: Optional[pendulum.Date]
