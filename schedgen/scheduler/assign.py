from __future__ import annotations

import logging
import random
from typing import List, Sequence, Tuple

from ..config import EngineSettings
from ..data.catalog import CourseCatalog
from ..data.professors import ProfessorDirectory
from ..data.registry import SlotLedger
from ..models.block import ScheduleBlock
from ..models.period import DAYS, TIME_SLOTS
from ..models.preferences import AFTERNOON_CLASSES, MORNING_CLASSES, NO_FRIDAYS, Preferences


def eligible_days(preferences: Preferences) -> List[str]:
    days = list(DAYS)
    if preferences.has(NO_FRIDAYS):
        days = [d for d in days if d != "Friday"]
    return days


def eligible_slots(preferences: Preferences, settings: EngineSettings) -> List[int]:
    slots = [s.id for s in TIME_SLOTS]
    # Morning wins when both flags are set
    if preferences.has(MORNING_CLASSES):
        slots = [s for s in slots if s <= settings.morning_last_slot]
    elif preferences.has(AFTERNOON_CLASSES):
        slots = [s for s in slots if s >= settings.afternoon_first_slot]
    return slots


def assign_slots(
    course_ids: Sequence[int],
    preferences: Preferences,
    catalog: CourseCatalog,
    ledger: SlotLedger | None = None,
    *,
    professors: ProfessorDirectory | None = None,
    settings: EngineSettings | None = None,
    rng: random.Random | None = None,
) -> Tuple[List[ScheduleBlock], SlotLedger, List[str]]:
    logger = logging.getLogger(__name__)
    audit: List[str] = []
    settings = settings or EngineSettings()
    rng = rng or random.Random()
    if ledger is None:
        ledger = SlotLedger(preferences.blocked_keys())

    days = eligible_days(preferences)
    slots = eligible_slots(preferences, settings)
    blocks: List[ScheduleBlock] = []

    for course_id in course_ids:
        course = catalog.get(course_id)
        if course is None:
            logger.info(f"Skip unknown course {course_id}")
            audit.append(f"Skipped unknown course id {course_id}.")
            continue

        pid = preferences.professor_id_for(course_id)
        professor = professors.name_for(pid) if professors is not None else None

        placed = 0
        attempts = 0
        while placed < settings.blocks_per_course and attempts < settings.max_attempts:
            attempts += 1
            if not days or not slots:
                # Nothing to draw from; the budget simply runs out
                continue
            day = rng.choice(days)
            sid = rng.choice(slots)
            if ledger.can_place(day, sid):
                b = ScheduleBlock(course.id, course.code, course.name, day, sid, professor)
                blocks.append(b)
                ledger.place(day, sid)
                placed += 1
                logger.debug(f"Assign {course.code} {day} {sid}")

        if placed < settings.blocks_per_course:
            logger.info(
                f"{course.code}: placed {placed}/{settings.blocks_per_course} after {attempts} attempts"
            )
            audit.append(
                f"{course.code} short by {settings.blocks_per_course - placed} block(s) after {attempts} attempts."
            )
        else:
            audit.append(f"{course.code} placed {placed} block(s) in {attempts} attempts.")

    return blocks, ledger, audit
