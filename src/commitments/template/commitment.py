# SPDX-License-Identifier: MIT

from commitments.model.commitment import Commitment
from commitments.model.entity_id import generate_entity_id
from commitments.time import now_utc


def get_commitment_template() -> Commitment:
    return {
        "id": generate_entity_id(),
        "title": "",
        "description": "",
        "created_at": now_utc(),
        "review_frequency": {"type": "interval", "interval_days": 7},
        "first_review_date": None,
        "last_reviewed_at": None,
        "status": "active",
        "sub_items": {"tasks": [], "habits": []},
        "notes": [],
        "events": [],
    }
