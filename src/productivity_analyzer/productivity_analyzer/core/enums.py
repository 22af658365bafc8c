from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Day status stored for every employee-day of a processed month.

    HOLIDAY is reserved: no rule produces it yet.
    """

    PRESENT = "PRESENT"
    ABSENT = "ABSENT"
    WEEKEND = "WEEKEND"
    HOLIDAY = "HOLIDAY"
