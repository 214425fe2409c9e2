from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, Iterable, List, Tuple

from .block import ScheduleBlock
from .period import SLOTS_BY_ID


Key = Tuple[str, int]  # (day, time_slot_id)


@dataclass(frozen=True)
class Schedule:
    id: str
    blocks: Tuple[ScheduleBlock, ...] = ()
    created_at: datetime = field(default_factory=datetime.now)

    def blocks_for_day(self, day: str) -> List[ScheduleBlock]:
        return sorted((b for b in self.blocks if b.day == day), key=lambda b: b.time_slot_id)

    def block_at(self, day: str, slot_id: int) -> ScheduleBlock | None:
        for b in self.blocks:
            if b.day == day and b.time_slot_id == slot_id:
                return b
        return None

    def iter_course(self, course_id: int) -> Iterable[ScheduleBlock]:
        for b in self.blocks:
            if b.course_id == course_id:
                yield b

    def course_ids(self) -> List[int]:
        # Distinct ids, first-seen order
        return list(dict.fromkeys(b.course_id for b in self.blocks))

    def occupancy(self) -> Dict[Key, List[ScheduleBlock]]:
        cells: Dict[Key, List[ScheduleBlock]] = {}
        for b in self.blocks:
            cells.setdefault(b.key, []).append(b)
        return cells

    def total_weekly_hours(self) -> float:
        minutes = 0
        for b in self.blocks:
            slot = SLOTS_BY_ID.get(b.time_slot_id)
            if slot is not None:
                minutes += slot.minutes
        return round(minutes / 60, 2)
