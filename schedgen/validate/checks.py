from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List

from ..models.period import DAYS
from ..models.preferences import Preferences
from ..models.schedule import Schedule


def validate_schedule(
    schedule: Schedule,
    preferences: Preferences | None = None,
    *,
    course_ids: List[int] | None = None,
    blocks_per_course: int = 2,
) -> Dict[str, object]:
    report: Dict[str, object] = {}
    preferences = preferences or Preferences()

    # Collisions
    cells = schedule.occupancy()
    report["clash_count"] = sum(1 for held in cells.values() if len(held) > 1)

    violations_by_rule: Dict[str, List[str]] = defaultdict(list)
    blocked = preferences.blocked_keys()
    for b in schedule.blocks:
        if b.key in blocked:
            violations_by_rule["blocked_slot"].append(f"{b.course_code} {b.day} {b.time_slot_id}")
    for (day, sid), held in cells.items():
        if len(held) > 1:
            codes = sorted(b.course_code for b in held)
            violations_by_rule["course_collision"].append(f"{day} {sid}: {', '.join(codes)}")
    report["violations_by_rule"] = dict(violations_by_rule)

    # Weekly contact blocks below target
    placed = Counter(b.course_id for b in schedule.blocks)
    requested = course_ids if course_ids is not None else schedule.course_ids()
    unmet: Dict[str, int] = {}
    for cid in dict.fromkeys(requested):
        have = placed.get(cid, 0)
        if have < blocks_per_course:
            unmet[str(cid)] = blocks_per_course - have
    report["unmet_weekly_loads"] = unmet

    # Idle slots between first and last class of each day
    day_gaps: Dict[str, int] = {}
    for d in DAYS:
        sids = sorted({b.time_slot_id for b in schedule.blocks if b.day == d})
        if len(sids) > 1:
            day_gaps[d] = (sids[-1] - sids[0] + 1) - len(sids)
    report["day_gaps"] = day_gaps

    report["blocks_by_day"] = {d: [b.course_code for b in schedule.blocks_for_day(d)] for d in DAYS}
    return report
