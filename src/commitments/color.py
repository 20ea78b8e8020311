# SPDX-License-Identifier: MIT

from typing import Optional

from commitments.model.urgency import HighlightType, Urgency

COMPLETED_COLOR = "bright_black"
INACTIVE_COLOR = "bright_black"

URGENCY_COLORS: dict[Urgency, Optional[str]] = {
    Urgency.URGENT: "red",
    Urgency.UPCOMING: "dark_orange",
    Urgency.TOMORROW: "yellow",
    Urgency.NORMAL: None,
}

HIGHLIGHT_COLORS: dict[HighlightType, str] = {
    HighlightType.URGENT: "red",
    HighlightType.UPCOMING: "dark_orange",
    HighlightType.NORMAL: "blue",
}


def colorize(text: str, color: Optional[str]) -> str:
    if color is None or text == "":
        return text
    return f"[{color}]{text}[/{color}]"


def urgency_color(urgency: Urgency) -> Optional[str]:
    return URGENCY_COLORS[urgency]
