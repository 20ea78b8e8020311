# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from commitments.color import (
    COMPLETED_COLOR,
    HIGHLIGHT_COLORS,
    INACTIVE_COLOR,
    colorize,
    urgency_color,
)
from commitments.model.commitment import Commitment
from commitments.model.event import Event
from commitments.model.habit import Habit
from commitments.model.task import Task
from commitments.model.timeline import HighlightedGroup, TimeBasedEntity
from commitments.query.sort import sort_events, sort_habits, sort_tasks
from commitments.service.day import DayContext
from commitments.service.habit import calculate_streak, is_habit_active
from commitments.service.recurrence import next_habit_date, relevant_event_date
from commitments.service.review import (
    is_review_due,
    next_review_date,
    review_frequency_text,
)
from commitments.service.timeline import (
    highlighted_groups,
    most_urgent_date,
    time_based_entities,
)
from commitments.service.urgency import (
    commitment_urgency,
    event_urgency,
    habit_urgency,
    task_urgency,
)
from commitments.time import (
    date_to_display_str,
    date_to_display_str_optional,
    datetime_to_display_local_datetime_str,
    datetime_to_display_local_datetime_str_optional,
)
from commitments.view.header import header


def commitments_view(
    day: DayContext,
    report_name: str,
    commitments: list[Commitment],
) -> None:
    """Display commitments in the order given, coloured by urgency."""
    header(day, report_name)

    commitments_table = Table(box=box.SIMPLE)
    commitments_table.add_column("id")
    commitments_table.add_column("title")
    commitments_table.add_column("urgency")
    commitments_table.add_column("next")
    commitments_table.add_column("review")
    commitments_table.add_column("review due")

    for commitment in commitments:
        urgency = commitment_urgency(commitment, day)
        color = urgency_color(urgency)
        commitments_table.add_row(
            commitment["id"],
            colorize(escape(commitment["title"]), color),
            colorize(urgency.value, color),
            datetime_to_display_local_datetime_str_optional(
                most_urgent_date(commitment, day)
            ),
            review_frequency_text(commitment),
            "yes" if is_review_due(commitment, day) else "",
        )

    console = Console()
    console.print(commitments_table)


def highlighted_groups_view(
    groups: list[HighlightedGroup], title: str = "highlights"
) -> None:
    highlights_table = Table(box=box.SIMPLE, title=title)
    highlights_table.add_column("highlight")
    highlights_table.add_column("type")
    highlights_table.add_column("title")
    highlights_table.add_column("date")

    for group in groups:
        color = HIGHLIGHT_COLORS[group["highlight_type"]]
        for entity in group["entities"]:
            highlights_table.add_row(
                colorize(group["highlight_type"].value, color),
                entity["entity_type"],
                escape(entity["title"]),
                datetime_to_display_local_datetime_str(entity["date"]),
            )

    console = Console()
    console.print(highlights_table)


def timeline_view(entities: list[TimeBasedEntity]) -> None:
    timeline_table = Table(box=box.SIMPLE, title="timeline")
    timeline_table.add_column("date")
    timeline_table.add_column("type")
    timeline_table.add_column("title")

    for entity in entities:
        timeline_table.add_row(
            datetime_to_display_local_datetime_str(entity["date"]),
            entity["entity_type"],
            escape(entity["title"]),
        )

    console = Console()
    console.print(timeline_table)


def tasks_view(day: DayContext, tasks: list[Task]) -> None:
    tasks_table = Table(box=box.SIMPLE, title="tasks")
    tasks_table.add_column("title")
    tasks_table.add_column("due")
    tasks_table.add_column("urgency")

    for task in sort_tasks(tasks, day):
        urgency = task_urgency(task, day)
        color = COMPLETED_COLOR if task["completed"] else urgency_color(urgency)
        tasks_table.add_row(
            colorize(escape(task["title"]), color),
            date_to_display_str_optional(task["due_at"]),
            colorize("done" if task["completed"] else urgency.value, color),
        )

    console = Console()
    console.print(tasks_table)


def habits_view(day: DayContext, habits: list[Habit]) -> None:
    habits_table = Table(box=box.SIMPLE, title="habits")
    habits_table.add_column("title")
    habits_table.add_column("schedule")
    habits_table.add_column("next")
    habits_table.add_column("streak")
    habits_table.add_column("urgency")

    for habit in sort_habits(habits, day):
        urgency = habit_urgency(habit, day)
        active = is_habit_active(habit, day)
        color = urgency_color(urgency) if active else INACTIVE_COLOR
        streak = calculate_streak(habit, day)
        habits_table.add_row(
            colorize(escape(habit["title"]), color),
            habit["schedule"],
            date_to_display_str_optional(next_habit_date(habit, day)),
            str(streak) if streak > 0 else "",
            colorize(urgency.value if active else "inactive", color),
        )

    console = Console()
    console.print(habits_table)


def events_view(day: DayContext, events: list[Event], is_past_view: bool = False) -> None:
    events_table = Table(box=box.SIMPLE, title="past events" if is_past_view else "events")
    events_table.add_column("title")
    events_table.add_column("date")
    events_table.add_column("time")
    events_table.add_column("repeats")
    events_table.add_column("location")
    events_table.add_column("urgency")

    for event in sort_events(events, day, is_past_view):
        urgency = event_urgency(event, day)
        color = urgency_color(urgency)
        events_table.add_row(
            colorize(escape(event["title"]), color),
            date_to_display_str(relevant_event_date(event, day.today)),
            "all day" if event["is_all_day"] else event["time"] or "",
            event["schedule"] or "",
            escape(event["location"] or ""),
            colorize(urgency.value, color),
        )

    console = Console()
    console.print(events_table)


def single_commitment_view(day: DayContext, commitment: Commitment) -> None:
    """Display a commitment's highlights, timeline and sorted sub-items."""
    header(day, escape(commitment["title"]))

    commitment_table = Table(box=box.SIMPLE)
    commitment_table.add_column("property")
    commitment_table.add_column("value")
    urgency = commitment_urgency(commitment, day)
    commitment_table.add_row("id", commitment["id"])
    commitment_table.add_row("description", escape(commitment["description"]))
    commitment_table.add_row("status", commitment["status"])
    commitment_table.add_row("urgency", colorize(urgency.value, urgency_color(urgency)))
    commitment_table.add_row("review", review_frequency_text(commitment))
    commitment_table.add_row(
        "last reviewed",
        datetime_to_display_local_datetime_str_optional(commitment["last_reviewed_at"]),
    )
    commitment_table.add_row(
        "next review",
        datetime_to_display_local_datetime_str(next_review_date(commitment, day)),
    )

    console = Console()
    console.print(commitment_table)

    highlighted_groups_view(highlighted_groups(commitment, day))
    timeline_view(time_based_entities(commitment, day))

    if len(commitment["sub_items"]["tasks"]) > 0:
        tasks_view(day, commitment["sub_items"]["tasks"])
    if len(commitment["sub_items"]["habits"]) > 0:
        habits_view(day, commitment["sub_items"]["habits"])

    upcoming_events = []
    past_events = []
    for event in commitment["events"]:
        if relevant_event_date(event, day.today) < day.today:
            past_events.append(event)
        else:
            upcoming_events.append(event)
    if len(upcoming_events) > 0:
        events_view(day, upcoming_events)
    if len(past_events) > 0:
        events_view(day, past_events, is_past_view=True)


def agenda_view(day: DayContext, commitments: list[Commitment]) -> None:
    """Display the highlighted groups of every commitment, one table each."""
    header(day, "agenda")

    for commitment in commitments:
        highlighted_groups_view(
            highlighted_groups(commitment, day), title=escape(commitment["title"])
        )
