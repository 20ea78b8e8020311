# SPDX-License-Identifier: MIT

from typing import Optional

from rich import print
from rich.padding import Padding

from commitments.service.day import DayContext
from commitments.time import date_to_display_str


def header(day: DayContext, sub_header: Optional[str] = None) -> None:
    """Print the application header with the logical date being reported on.

    Args:
        day: The day context the report was computed with
        sub_header: Optional sub-header text to display
    """
    additional = ""
    if sub_header is not None:
        additional = f"[sandy_brown]{sub_header}[/sandy_brown]"
    today = f"[plum1]{date_to_display_str(day.today)}[/plum1]"

    print(Padding("[dark_orange]commitments[/dark_orange]", (1, 0, 0, 1)))
    print(Padding(additional, (0, 1)))
    print(Padding(today, (0, 1)))
