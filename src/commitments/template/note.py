# SPDX-License-Identifier: MIT

from commitments.model.entity_id import generate_entity_id
from commitments.model.note import Note
from commitments.time import now_utc


def get_note_template() -> Note:
    return {
        "id": generate_entity_id(),
        "content": "",
        "timestamp": now_utc(),
    }
