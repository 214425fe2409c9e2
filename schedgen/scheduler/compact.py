from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Tuple

from ..data.registry import SlotLedger
from ..models.block import ScheduleBlock
from ..models.period import TIME_SLOTS


def consecutive_pair(day: str, reserved: SlotLedger) -> Tuple[int, int] | None:
    # Lowest free (i, i+1) on the day, scanning slot ids ascending
    for first, second in zip(TIME_SLOTS, TIME_SLOTS[1:]):
        if (day, first.id) not in reserved.used and (day, second.id) not in reserved.used:
            return first.id, second.id
    return None


def compact_days(
    blocks: List[ScheduleBlock],
    ledger: SlotLedger,
) -> Tuple[List[ScheduleBlock], SlotLedger, List[str]]:
    """Move each two-block course onto adjacent slots of its first block's day.

    Reservations are only those made by this pass, in course order; cells
    held by courses not yet visited are not consulted.
    """
    logger = logging.getLogger(__name__)
    audit: List[str] = []

    by_course: Dict[int, List[ScheduleBlock]] = {}
    for b in blocks:
        by_course.setdefault(b.course_id, []).append(b)

    reserved = SlotLedger(ledger.blocked)
    out: List[ScheduleBlock] = []
    for course_blocks in by_course.values():
        if len(course_blocks) == 2:
            first, second = course_blocks
            pair = consecutive_pair(first.day, reserved)
            if pair is not None:
                out.append(replace(first, time_slot_id=pair[0]))
                out.append(replace(second, day=first.day, time_slot_id=pair[1]))
                reserved.place(first.day, pair[0])
                reserved.place(first.day, pair[1])
                logger.info(f"Compact {first.course_code} -> {first.day} {pair[0]}+{pair[1]}")
                audit.append(f"{first.course_code} grouped on {first.day} slots {pair[0]}-{pair[1]}.")
                for sid in pair:
                    if ledger.is_blocked(first.day, sid):
                        logger.warning(f"Day compaction put {first.course_code} on blocked slot {first.day} {sid}")
                        audit.append(f"{first.course_code} now on blocked slot {first.day} {sid}.")
                continue
            audit.append(f"{first.course_code} left in place: no free pair on {first.day}.")
        for b in course_blocks:
            out.append(b)
            reserved.place(b.day, b.time_slot_id)

    return out, reserved, audit
