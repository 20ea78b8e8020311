import unittest

import pendulum

from commitments.model.commitment import Commitment
from commitments.service.day import DayContext
from commitments.service.habit import is_completed_for_date
from commitments.service.review import (
    complete_review,
    is_review_due,
    next_review_date,
    review_frequency_text,
)
from commitments.template.commitment import get_commitment_template
from commitments.template.habit import get_habit_template
from commitments.template.task import get_task_template

NOW = pendulum.datetime(2024, 3, 13, 10, tz="UTC")


def make_day() -> DayContext:
    return DayContext(NOW, tz="UTC")


def make_commitment(interval_days=7) -> Commitment:
    commitment = get_commitment_template()
    commitment["title"] = "Garden"
    commitment["review_frequency"] = {"type": "interval", "interval_days": interval_days}
    return commitment


class TestReviewCycle(unittest.TestCase):
    def test_never_reviewed_is_due_now(self) -> None:
        day = make_day()
        commitment = make_commitment()
        self.assertEqual(next_review_date(commitment, day), NOW)
        self.assertTrue(is_review_due(commitment, day))

    def test_first_review_date_defers_first_review(self) -> None:
        day = make_day()
        commitment = make_commitment()
        commitment["first_review_date"] = NOW.add(days=2)
        self.assertFalse(is_review_due(commitment, day))

    def test_reviewed_ten_days_ago_is_due(self) -> None:
        commitment = make_commitment()
        commitment["last_reviewed_at"] = NOW.subtract(days=10)
        self.assertTrue(is_review_due(commitment, make_day()))

    def test_reviewed_three_days_ago_is_not_due(self) -> None:
        commitment = make_commitment()
        commitment["last_reviewed_at"] = NOW.subtract(days=3)
        self.assertFalse(is_review_due(commitment, make_day()))
        self.assertEqual(next_review_date(commitment, make_day()), NOW.add(days=4))

    def test_missing_interval_defaults_to_a_week(self) -> None:
        commitment = make_commitment(interval_days=None)
        commitment["last_reviewed_at"] = NOW.subtract(days=3)
        self.assertEqual(next_review_date(commitment, make_day()), NOW.add(days=4))

    def test_custom_schedule_falls_back_to_weekly(self) -> None:
        commitment = make_commitment()
        commitment["review_frequency"] = {"type": "custom", "custom_cron": "0 9 * * 1"}
        commitment["last_reviewed_at"] = NOW
        self.assertEqual(next_review_date(commitment, make_day()), NOW.add(days=7))

    def test_interval_without_days_reads_as_weekly(self) -> None:
        commitment = make_commitment(interval_days=None)
        commitment["last_reviewed_at"] = NOW
        self.assertEqual(review_frequency_text(commitment), "Weekly")
        self.assertEqual(next_review_date(commitment, make_day()), NOW.add(days=7))

    def test_frequency_text(self) -> None:
        cases = [
            (1, "Daily"),
            (7, "Weekly"),
            (14, "Every two weeks"),
            (30, "Monthly"),
            (90, "Quarterly"),
            (3, "Every 3 days"),
            (None, "Weekly"),
        ]
        for interval_days, expected in cases:
            self.assertEqual(
                review_frequency_text(make_commitment(interval_days)), expected
            )

        commitment = make_commitment()
        commitment["review_frequency"] = {"type": "custom", "custom_cron": "@weekly"}
        self.assertEqual(review_frequency_text(commitment), "Custom schedule")


class TestCompleteReview(unittest.TestCase):
    def test_applies_review_outcome(self) -> None:
        day = make_day()
        commitment = make_commitment()

        done = get_task_template()
        done["title"] = "Water plants"
        open_task = get_task_template()
        open_task["title"] = "Buy seeds"
        open_task["completed"] = True
        habit = get_habit_template()
        habit["start_on"] = pendulum.date(2024, 1, 1)
        commitment["sub_items"]["tasks"] = [done, open_task]
        commitment["sub_items"]["habits"] = [habit]

        reviewed = complete_review(
            commitment, day, [done["id"]], [habit["id"]], note_content="  Went well  "
        )

        self.assertEqual(reviewed["last_reviewed_at"], NOW)
        self.assertTrue(reviewed["sub_items"]["tasks"][0]["completed"])
        self.assertFalse(reviewed["sub_items"]["tasks"][1]["completed"])
        self.assertTrue(
            is_completed_for_date(reviewed["sub_items"]["habits"][0], NOW, day)
        )
        self.assertEqual(len(reviewed["notes"]), 1)
        self.assertEqual(reviewed["notes"][0]["content"], "Went well")
        self.assertFalse(is_review_due(reviewed, day))

        # input left untouched
        self.assertIsNone(commitment["last_reviewed_at"])
        self.assertEqual(commitment["sub_items"]["habits"][0]["history"], {})

    def test_blank_note_is_skipped(self) -> None:
        reviewed = complete_review(make_commitment(), make_day(), [], [], note_content="  ")
        self.assertEqual(reviewed["notes"], [])


if __name__ == "__main__":
    unittest.main(verbosity=2)
