from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List


@dataclass(frozen=True)
class TimeSlot:
    id: int
    start: str  # HH:MM
    end: str

    @property
    def minutes(self) -> int:
        sh, sm = (int(x) for x in self.start.split(":"))
        eh, em = (int(x) for x in self.end.split(":"))
        return (eh * 60 + em) - (sh * 60 + sm)


TIME_SLOTS: List[TimeSlot] = [
    TimeSlot(1, "08:30", "09:50"),
    TimeSlot(2, "10:00", "11:20"),
    TimeSlot(3, "11:30", "12:50"),
    TimeSlot(4, "13:00", "14:20"),
    TimeSlot(5, "14:30", "15:50"),
    TimeSlot(6, "16:00", "17:20"),
    TimeSlot(7, "17:25", "18:45"),
    TimeSlot(8, "18:50", "20:10"),
    TimeSlot(9, "20:15", "21:35"),
]

SLOTS_BY_ID: Dict[int, TimeSlot] = {s.id: s for s in TIME_SLOTS}

DAYS: List[str] = ["Monday", "Tuesday", "Wednesday", "Thursday", "Friday"]

# Two-letter codes used by the external solver's forbidden-range strings
DAY_CODES: Dict[str, str] = {
    "Monday": "MO",
    "Tuesday": "TU",
    "Wednesday": "WE",
    "Thursday": "TH",
    "Friday": "FR",
}


def is_weekday(day: str) -> bool:
    return day in DAYS
