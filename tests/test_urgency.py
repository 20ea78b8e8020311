import unittest

import pendulum

from commitments.model.commitment import Commitment
from commitments.model.urgency import Urgency
from commitments.service.day import DayContext
from commitments.service.habit import record_habit_entry
from commitments.service.urgency import (
    commitment_urgency,
    event_urgency,
    habit_urgency,
    most_urgent,
    task_urgency,
)
from commitments.template.commitment import get_commitment_template
from commitments.template.event import get_event_template
from commitments.template.habit import get_habit_template
from commitments.template.task import get_task_template

NOW = pendulum.datetime(2024, 3, 13, 10, tz="UTC")
TODAY = pendulum.date(2024, 3, 13)


def make_day() -> DayContext:
    return DayContext(NOW, tz="UTC")


def make_commitment() -> Commitment:
    commitment = get_commitment_template()
    commitment["title"] = "Health"
    commitment["last_reviewed_at"] = NOW.subtract(days=1)
    return commitment


class TestTaskUrgency(unittest.TestCase):
    def test_by_due_date(self) -> None:
        day = make_day()
        task = get_task_template()
        cases = [
            (None, Urgency.NORMAL),
            (pendulum.date(2024, 3, 1), Urgency.URGENT),
            (TODAY, Urgency.UPCOMING),
            (pendulum.date(2024, 3, 14), Urgency.TOMORROW),
            (pendulum.date(2024, 3, 20), Urgency.NORMAL),
        ]
        for due_at, expected in cases:
            task["due_at"] = due_at
            self.assertEqual(task_urgency(task, day), expected, due_at)

    def test_completed_is_normal(self) -> None:
        task = get_task_template()
        task["due_at"] = pendulum.date(2024, 3, 1)
        task["completed"] = True
        self.assertEqual(task_urgency(task, make_day()), Urgency.NORMAL)


class TestHabitUrgency(unittest.TestCase):
    def test_due_today(self) -> None:
        habit = get_habit_template()
        habit["start_on"] = pendulum.date(2024, 1, 1)
        self.assertEqual(habit_urgency(habit, make_day()), Urgency.UPCOMING)

    def test_completed_today_is_due_tomorrow(self) -> None:
        day = make_day()
        habit = get_habit_template()
        habit["start_on"] = pendulum.date(2024, 1, 1)
        habit = record_habit_entry(habit, NOW, day)
        self.assertEqual(habit_urgency(habit, day), Urgency.TOMORROW)

    def test_inactive_is_normal(self) -> None:
        day = make_day()
        habit = get_habit_template()
        habit["start_on"] = pendulum.date(2024, 3, 14)
        self.assertEqual(habit_urgency(habit, day), Urgency.NORMAL)

        habit["start_on"] = pendulum.date(2024, 1, 1)
        habit["end_on"] = pendulum.date(2024, 3, 1)
        self.assertEqual(habit_urgency(habit, day), Urgency.NORMAL)


class TestEventUrgency(unittest.TestCase):
    def test_by_date(self) -> None:
        day = make_day()
        event = get_event_template()
        event["date"] = TODAY
        self.assertEqual(event_urgency(event, day), Urgency.UPCOMING)
        event["date"] = pendulum.date(2024, 3, 14)
        self.assertEqual(event_urgency(event, day), Urgency.TOMORROW)
        event["date"] = pendulum.date(2024, 3, 20)
        self.assertEqual(event_urgency(event, day), Urgency.NORMAL)

    def test_past_reminder_makes_event_urgent(self) -> None:
        event = get_event_template()
        event["date"] = pendulum.date(2024, 3, 20)
        event["reminder_time"] = NOW.subtract(hours=1)
        self.assertEqual(event_urgency(event, make_day()), Urgency.URGENT)

    def test_future_reminder_is_ignored(self) -> None:
        event = get_event_template()
        event["date"] = pendulum.date(2024, 3, 14)
        event["reminder_time"] = NOW.add(hours=1)
        self.assertEqual(event_urgency(event, make_day()), Urgency.TOMORROW)

    def test_reminder_after_event_passed(self) -> None:
        event = get_event_template()
        event["date"] = pendulum.date(2024, 3, 1)
        event["reminder_time"] = pendulum.datetime(2024, 2, 28, tz="UTC")
        self.assertEqual(event_urgency(event, make_day()), Urgency.NORMAL)

    def test_ended_recurrence_is_normal(self) -> None:
        event = get_event_template()
        event["date"] = pendulum.date(2024, 3, 1)
        event["schedule"] = "daily"
        event["end_on"] = pendulum.date(2024, 3, 5)
        event["reminder_time"] = NOW.subtract(hours=1)
        self.assertEqual(event_urgency(event, make_day()), Urgency.NORMAL)


class TestCommitmentUrgency(unittest.TestCase):
    def test_review_due_is_urgent(self) -> None:
        commitment = make_commitment()
        commitment["last_reviewed_at"] = None
        self.assertEqual(commitment_urgency(commitment, make_day()), Urgency.URGENT)

    def test_most_urgent_sub_item_wins(self) -> None:
        commitment = make_commitment()
        tomorrow_task = get_task_template()
        tomorrow_task["due_at"] = pendulum.date(2024, 3, 14)
        today_event = get_event_template()
        today_event["date"] = TODAY
        commitment["sub_items"]["tasks"].append(tomorrow_task)
        commitment["events"].append(today_event)
        self.assertEqual(commitment_urgency(commitment, make_day()), Urgency.UPCOMING)

    def test_nothing_pending_is_normal(self) -> None:
        self.assertEqual(commitment_urgency(make_commitment(), make_day()), Urgency.NORMAL)

    def test_most_urgent(self) -> None:
        self.assertEqual(most_urgent([]), Urgency.NORMAL)
        self.assertEqual(
            most_urgent([Urgency.TOMORROW, Urgency.URGENT, Urgency.UPCOMING]),
            Urgency.URGENT,
        )


if __name__ == "__main__":
    unittest.main(verbosity=2)
