# SPDX-License-Identifier: MIT


class EntityType:
    COMMITMENT = "commitment"
    TASK = "task"
    HABIT = "habit"
    EVENT = "event"
    NOTE = "note"
    REVIEW = "review"
