# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from commitments.model.entity_id import EntityId


class Note(TypedDict):
    id: EntityId
    content: str
    timestamp: pendulum.DateTime
