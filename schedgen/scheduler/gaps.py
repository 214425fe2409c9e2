from __future__ import annotations

import logging
from dataclasses import replace
from typing import Dict, List, Tuple

from ..data.registry import SlotLedger
from ..models.block import ScheduleBlock


def compact_day(blocks: List[ScheduleBlock]) -> List[ScheduleBlock]:
    if len(blocks) <= 1:
        return list(blocks)
    ordered = sorted(blocks, key=lambda b: b.time_slot_id)
    start = ordered[0].time_slot_id
    return [replace(b, time_slot_id=start + k) for k, b in enumerate(ordered)]


def minimize_gaps(
    blocks: List[ScheduleBlock],
    ledger: SlotLedger,
) -> Tuple[List[ScheduleBlock], SlotLedger, List[str]]:
    """Pack each day's blocks into a contiguous run from that day's earliest slot.

    The new slots are not checked against the blocked or used cells: a
    compacted block may land on a blocked slot. Such moves are logged and
    reported in the audit but kept.
    """
    logger = logging.getLogger(__name__)
    audit: List[str] = []

    by_day: Dict[str, List[ScheduleBlock]] = {}
    for b in blocks:
        by_day.setdefault(b.day, []).append(b)

    out: List[ScheduleBlock] = []
    for day, day_blocks in by_day.items():
        compacted = compact_day(day_blocks)
        moved = sum(
            1 for old, new in zip(sorted(day_blocks, key=lambda b: b.time_slot_id), compacted)
            if old.time_slot_id != new.time_slot_id
        )
        if moved:
            audit.append(f"{day}: moved {moved} block(s) to close gaps.")
        for b in compacted:
            if ledger.is_blocked(b.day, b.time_slot_id):
                logger.warning(f"Gap compaction put {b.course_code} on blocked slot {b.day} {b.time_slot_id}")
                audit.append(f"{b.course_code} now on blocked slot {b.day} {b.time_slot_id}.")
        out.extend(compacted)

    return out, ledger.rebuilt(out), audit
