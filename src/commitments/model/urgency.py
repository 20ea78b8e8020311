# SPDX-License-Identifier: MIT

from enum import StrEnum


class Urgency(StrEnum):
    URGENT = "urgent"
    UPCOMING = "upcoming"
    TOMORROW = "tomorrow"
    NORMAL = "normal"


# Lower number = higher priority
URGENCY_ORDER: dict[Urgency, int] = {
    Urgency.URGENT: 0,
    Urgency.UPCOMING: 1,
    Urgency.TOMORROW: 2,
    Urgency.NORMAL: 3,
}


class HighlightType(StrEnum):
    URGENT = "urgent"
    UPCOMING = "upcoming"
    NORMAL = "normal"


HIGHLIGHT_ORDER: dict[HighlightType, int] = {
    HighlightType.URGENT: 0,
    HighlightType.UPCOMING: 1,
    HighlightType.NORMAL: 2,
}
