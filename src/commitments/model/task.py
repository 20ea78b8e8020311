# SPDX-License-Identifier: MIT

from typing import Optional, TypedDict

import pendulum

from commitments.model.entity_id import EntityId


class Task(TypedDict):
    id: EntityId
    title: str
    due_at: Optional[pendulum.Date]
    completed: bool
