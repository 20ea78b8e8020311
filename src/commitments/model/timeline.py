# SPDX-License-Identifier: MIT

from typing import Literal, TypedDict, Union

import pendulum

from commitments.model.entity_id import EntityId
from commitments.model.event import Event
from commitments.model.habit import Habit
from commitments.model.task import Task
from commitments.model.urgency import HighlightType

TimeBasedEntityType = Literal["task", "habit", "event", "review"]


class ReviewReference(TypedDict):
    id: EntityId
    title: str


class TimeBasedEntity(TypedDict):
    id: str
    title: str
    date: pendulum.DateTime
    entity_type: TimeBasedEntityType
    original_entity: Union[Event, Task, Habit, ReviewReference]


class HighlightedGroup(TypedDict):
    entities: list[TimeBasedEntity]
    highlight_type: HighlightType
