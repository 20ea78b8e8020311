# SPDX-License-Identifier: MIT

from commitments.model.entity_id import generate_entity_id
from commitments.model.task import Task


def get_task_template() -> Task:
    return {
        "id": generate_entity_id(),
        "title": "",
        "due_at": None,
        "completed": False,
    }
