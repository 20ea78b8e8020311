# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Optional, cast

from yaml import YAMLError, load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]

from commitments.model.commitment import Commitment, ReviewFrequency
from commitments.model.entity_id import EntityId
from commitments.model.event import Event
from commitments.model.habit import Habit, HabitEntry, HabitTarget
from commitments.model.note import Note
from commitments.model.task import Task
from commitments.service.habit import convert_legacy_habit_history
from commitments.time import (
    date_from_value,
    date_from_value_optional,
    datetime_from_value,
    datetime_from_value_optional,
)

logger = logging.getLogger(__name__)


class SnapshotFormatError(Exception):
    """Raised when a commitments snapshot cannot be read."""

    pass


class CommitmentNotFoundError(Exception):
    """Raised when no commitment has the requested id."""

    pass


def _field(raw: dict[str, Any], name: str, camel_name: str, default: Any = None) -> Any:
    # Snapshots exported by the web app use camelCase keys
    if name in raw:
        return raw[name]
    return raw.get(camel_name, default)


def target_from_value(value: Any) -> HabitTarget:
    if value is None:
        return {"kind": "none"}
    if isinstance(value, dict) and "kind" in value:
        return cast(HabitTarget, value)
    if isinstance(value, bool):
        raise SnapshotFormatError(f"Unsupported habit target: {value!r}")
    if isinstance(value, (int, float)):
        return {"kind": "numeric", "amount": float(value)}
    if isinstance(value, list):
        return {"kind": "checklist", "items": [str(item) for item in value]}
    raise SnapshotFormatError(f"Unsupported habit target: {value!r}")


def task_from_dict(raw: dict[str, Any]) -> Task:
    return {
        "id": str(raw["id"]),
        "title": raw.get("title", ""),
        "due_at": date_from_value_optional(_field(raw, "due_at", "dueAt")),
        "completed": bool(raw.get("completed", False)),
    }


def habit_entry_from_dict(raw: dict[str, Any]) -> HabitEntry:
    return {
        "date": datetime_from_value(raw["date"]),
        "value": raw.get("value"),
        "completed": bool(raw.get("completed", True)),
    }


def habit_from_dict(raw: dict[str, Any]) -> Habit:
    raw = convert_legacy_habit_history(raw)
    history = raw.get("history") or {}
    return {
        "id": str(raw["id"]),
        "title": raw.get("title", ""),
        "schedule": raw.get("schedule", "daily"),
        "history": {
            str(key): habit_entry_from_dict(entry) for key, entry in history.items()
        },
        "target": target_from_value(raw.get("target")),
        "start_on": date_from_value(_field(raw, "start_on", "startOn")),
        "end_on": date_from_value_optional(_field(raw, "end_on", "endOn")),
    }


def event_from_dict(raw: dict[str, Any]) -> Event:
    return {
        "id": str(raw["id"]),
        "title": raw.get("title", ""),
        "date": date_from_value(raw["date"]),
        "time": raw.get("time") or None,
        "is_all_day": bool(_field(raw, "is_all_day", "isAllDay", False)),
        "location": raw.get("location"),
        "description": raw.get("description"),
        "reminder_time": datetime_from_value_optional(
            _field(raw, "reminder_time", "reminderTime")
        ),
        "schedule": raw.get("schedule") or None,
        "end_on": date_from_value_optional(_field(raw, "end_on", "endOn")),
    }


def note_from_dict(raw: dict[str, Any]) -> Note:
    return {
        "id": str(raw["id"]),
        "content": raw.get("content", ""),
        "timestamp": datetime_from_value(raw["timestamp"]),
    }


def review_frequency_from_dict(raw: Optional[dict[str, Any]]) -> ReviewFrequency:
    if raw is None:
        return {"type": "interval", "interval_days": None}
    if raw.get("type") == "custom":
        return {
            "type": "custom",
            "custom_cron": _field(raw, "custom_cron", "customCron", "") or "",
        }
    interval_days = _field(raw, "interval_days", "intervalDays")
    return {
        "type": "interval",
        "interval_days": int(interval_days) if interval_days else None,
    }


def commitment_from_dict(raw: dict[str, Any]) -> Commitment:
    """
    Build a commitment from plain snapshot data.

    Dates may be ISO 8601 strings or YAML timestamps. Habits still using the
    legacy flat-list history are upgraded on the way in.
    """
    sub_items = _field(raw, "sub_items", "subItems") or {}
    # Older exports kept events under subItems
    events = raw.get("events") or sub_items.get("events") or []
    return {
        "id": str(raw["id"]),
        "title": raw.get("title", ""),
        "description": raw.get("description", ""),
        "created_at": datetime_from_value(_field(raw, "created_at", "createdAt")),
        "review_frequency": review_frequency_from_dict(
            _field(raw, "review_frequency", "reviewFrequency")
        ),
        "first_review_date": datetime_from_value_optional(
            _field(raw, "first_review_date", "firstReviewDate")
        ),
        "last_reviewed_at": datetime_from_value_optional(
            _field(raw, "last_reviewed_at", "lastReviewedAt")
        ),
        "status": raw.get("status", "active"),
        "sub_items": {
            "tasks": [task_from_dict(task) for task in sub_items.get("tasks") or []],
            "habits": [
                habit_from_dict(habit) for habit in sub_items.get("habits") or []
            ],
        },
        "notes": [note_from_dict(note) for note in raw.get("notes") or []],
        "events": [event_from_dict(event) for event in events],
    }


class CommitmentRepository:
    """Read-only access to the commitments stored in a JSON or YAML snapshot."""

    def __init__(self, path: Path) -> None:
        self.path = path
        self._commitments: Optional[list[Commitment]] = None

    @property
    def commitments(self) -> list[Commitment]:
        if self._commitments is None:
            self.__load_data()
        if self._commitments is None:
            raise ValueError()
        return self._commitments

    def __load_data(self) -> None:
        # JSON is a subset of YAML, one loader covers both formats
        try:
            raw = load(self.path.read_text(), Loader=Loader)
        except (OSError, UnicodeDecodeError, YAMLError) as e:
            raise SnapshotFormatError(f"{self.path}: {e}") from e
        if raw is None:
            raw = []
        if isinstance(raw, dict) and "commitments" in raw:
            raw = raw["commitments"]
        if not isinstance(raw, list):
            raise SnapshotFormatError(
                f"{self.path}: expected a list of commitments, got {type(raw).__name__}"
            )

        try:
            self._commitments = [commitment_from_dict(item) for item in raw]
        except (KeyError, TypeError, ValueError) as e:
            raise SnapshotFormatError(f"{self.path}: {e}") from e

        logger.info("loaded %d commitments from %s", len(self._commitments), self.path)

    def get_all_commitments(self) -> list[Commitment]:
        return deepcopy(self.commitments)

    def get_active_commitments(self) -> list[Commitment]:
        return deepcopy(
            [
                commitment
                for commitment in self.commitments
                if commitment["status"] == "active"
            ]
        )

    def get_archived_commitments(self) -> list[Commitment]:
        return deepcopy(
            [
                commitment
                for commitment in self.commitments
                if commitment["status"] == "archived"
            ]
        )

    def get_commitment(self, id: EntityId) -> Commitment:
        matches = [commitment for commitment in self.commitments if commitment["id"] == id]
        if len(matches) == 0:
            raise CommitmentNotFoundError(f"No commitment with id {id}")
        return deepcopy(matches[0])
