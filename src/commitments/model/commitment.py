# SPDX-License-Identifier: MIT

from typing import Literal, Optional, TypedDict, Union

import pendulum

from commitments.model.entity_id import EntityId
from commitments.model.event import Event
from commitments.model.habit import Habit
from commitments.model.note import Note
from commitments.model.task import Task

CommitmentStatus = Literal["active", "archived"]


class IntervalReviewFrequency(TypedDict):
    type: Literal["interval"]
    interval_days: Optional[int]


class CustomReviewFrequency(TypedDict):
    # Cron expressions are kept verbatim; they are not evaluated yet
    type: Literal["custom"]
    custom_cron: str


ReviewFrequency = Union[IntervalReviewFrequency, CustomReviewFrequency]


class SubItems(TypedDict):
    tasks: list[Task]
    habits: list[Habit]


class Commitment(TypedDict):
    id: EntityId
    title: str
    description: str
    created_at: pendulum.DateTime
    review_frequency: ReviewFrequency
    first_review_date: Optional[pendulum.DateTime]
    last_reviewed_at: Optional[pendulum.DateTime]
    status: CommitmentStatus
    sub_items: SubItems
    notes: list[Note]
    events: list[Event]
