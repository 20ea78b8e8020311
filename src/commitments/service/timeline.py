# SPDX-License-Identifier: MIT

from typing import Optional, cast

import pendulum

from commitments.model.commitment import Commitment
from commitments.model.entity_type import EntityType
from commitments.model.event import Event
from commitments.model.timeline import HighlightedGroup, TimeBasedEntity
from commitments.model.urgency import HIGHLIGHT_ORDER, HighlightType
from commitments.service.day import DayContext
from commitments.service.recurrence import next_event_date, next_habit_date
from commitments.service.review import next_review_date


def time_based_entities(
    commitment: Commitment, day: DayContext
) -> list[TimeBasedEntity]:
    """
    Gets all time-based entities of a commitment, closest date first.

    Includes events (at their next occurrence), incomplete tasks with a due
    date, habits that are still due at some point, and the next review.
    Calendar dates are placed at the start of their logical day.
    """
    today = day.today
    entities: list[TimeBasedEntity] = []

    for event in commitment["events"]:
        event_date = next_event_date(event, today)
        if event_date is not None:
            entities.append(
                {
                    "id": event["id"],
                    "title": event["title"],
                    "date": day.start_of(event_date),
                    "entity_type": "event",
                    "original_entity": event,
                }
            )

    for task in commitment["sub_items"]["tasks"]:
        if task["due_at"] is not None and not task["completed"]:
            entities.append(
                {
                    "id": task["id"],
                    "title": task["title"],
                    "date": day.start_of(task["due_at"]),
                    "entity_type": "task",
                    "original_entity": task,
                }
            )

    for habit in commitment["sub_items"]["habits"]:
        habit_date = next_habit_date(habit, day, today)
        if habit_date is not None:
            entities.append(
                {
                    "id": habit["id"],
                    "title": habit["title"],
                    "date": day.start_of(habit_date),
                    "entity_type": "habit",
                    "original_entity": habit,
                }
            )

    entities.append(
        {
            "id": f"{commitment['id']}-review",
            "title": f"Review: {commitment['title']}",
            "date": next_review_date(commitment, day),
            "entity_type": "review",
            "original_entity": {
                "id": commitment["id"],
                "title": f"Review {commitment['title']}",
            },
        }
    )

    entities.sort(key=lambda entity: entity["date"])
    return entities


def highlighted_groups(
    commitment: Commitment, day: DayContext
) -> list[HighlightedGroup]:
    """
    Groups of entities worth surfacing for a commitment, most urgent first.

    Events are highlighted when they happen today or tomorrow (upcoming), or
    when their reminder has gone off before they take place (urgent). Tasks,
    habits and the review are urgent once their date has passed and upcoming
    on the day itself. When nothing qualifies, the single closest entity is
    returned as a normal group.
    """
    entities = time_based_entities(commitment, day)
    today = day.today
    tomorrow = day.tomorrow

    urgent_events: list[TimeBasedEntity] = []
    upcoming_events: list[TimeBasedEntity] = []
    missed_deadlines: list[TimeBasedEntity] = []
    due_today: list[TimeBasedEntity] = []

    for entity in entities:
        entity_date = day.date_of(entity["date"])

        if entity["entity_type"] == EntityType.EVENT:
            reminder_time = cast(Event, entity["original_entity"])["reminder_time"]
            if entity_date == today or entity_date == tomorrow:
                upcoming_events.append(entity)
            elif (
                reminder_time is not None
                and reminder_time <= day.now
                and entity_date >= today
            ):
                urgent_events.append(entity)
        elif entity_date < today:
            missed_deadlines.append(entity)
        elif entity_date == today:
            due_today.append(entity)

    groups: list[HighlightedGroup] = []
    for group_entities, highlight_type in (
        (urgent_events, HighlightType.URGENT),
        (upcoming_events, HighlightType.UPCOMING),
        (missed_deadlines, HighlightType.URGENT),
        (due_today, HighlightType.UPCOMING),
    ):
        if len(group_entities) > 0:
            groups.append({"entities": group_entities, "highlight_type": highlight_type})

    if len(groups) == 0 and len(entities) > 0:
        groups.append({"entities": [entities[0]], "highlight_type": HighlightType.NORMAL})

    groups.sort(key=lambda group: HIGHLIGHT_ORDER[group["highlight_type"]])
    return groups


def most_urgent_date(
    commitment: Commitment, day: DayContext
) -> Optional[pendulum.DateTime]:
    entities = time_based_entities(commitment, day)
    if len(entities) == 0:
        return None
    return entities[0]["date"]
