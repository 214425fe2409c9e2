from __future__ import annotations

import logging
import random
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, Iterable, List, Sequence

from ..config import EngineSettings
from ..data.catalog import CourseCatalog
from ..data.professors import ProfessorDirectory
from ..data.registry import SlotLedger
from ..models.block import ScheduleBlock
from ..models.preferences import COMPACT_DAYS, MINIMIZE_GAPS, Preferences
from ..models.schedule import Schedule
from .assign import assign_slots
from .compact import compact_days
from .gaps import minimize_gaps
from .outcome import PlacementOutcome, summarize_outcome


@dataclass(frozen=True)
class GenerationResult:
    schedule: Schedule
    outcome: PlacementOutcome
    audit: List[str] = field(default_factory=list)


def assemble_schedule(
    blocks: Iterable[ScheduleBlock],
    *,
    clock: Callable[[], datetime] | None = None,
    rng: random.Random | None = None,
) -> Schedule:
    now = (clock or datetime.now)()
    # Millisecond stamp plus a short suffix so back-to-back calls get distinct ids
    suffix = (rng or random.Random()).getrandbits(24)
    sid = f"schedule-{int(now.timestamp() * 1000)}-{suffix:06x}"
    return Schedule(id=sid, blocks=tuple(blocks), created_at=now)


def generate_schedule(
    course_ids: Sequence[int],
    preferences: Preferences,
    catalog: CourseCatalog,
    *,
    professors: ProfessorDirectory | None = None,
    settings: EngineSettings | None = None,
    rng: random.Random | None = None,
    clock: Callable[[], datetime] | None = None,
) -> GenerationResult:
    logger = logging.getLogger(__name__)
    settings = settings or EngineSettings()
    rng = rng or random.Random()
    started = time.perf_counter()

    ledger = SlotLedger(preferences.blocked_keys())
    blocks, ledger, assign_audit = assign_slots(
        course_ids, preferences, catalog, ledger, professors=professors, settings=settings, rng=rng
    )
    audit: List[str] = ["Assignment:"] + assign_audit
    if preferences.has(MINIMIZE_GAPS):
        blocks, ledger, gap_audit = minimize_gaps(blocks, ledger)
        audit.extend(["", "Gap minimization:"] + gap_audit)
    if preferences.has(COMPACT_DAYS):
        blocks, ledger, day_audit = compact_days(blocks, ledger)
        audit.extend(["", "Day compaction:"] + day_audit)

    outcome = summarize_outcome(course_ids, blocks, catalog, settings.blocks_per_course)
    schedule = assemble_schedule(blocks, clock=clock, rng=rng)
    logger.info(
        f"Generated {schedule.id}: {len(schedule.blocks)} blocks for {len(course_ids)} course(s) "
        f"in {time.perf_counter() - started:.3f}s"
    )
    if not outcome.satisfied:
        for s in outcome.unfulfilled:
            logger.info(f"Course {s.course_id} unfulfilled ({s.reason}): {s.placed}/{s.target}")
    return GenerationResult(schedule=schedule, outcome=outcome, audit=audit)


def build_schedule(
    course_ids: Sequence[int],
    preferences: Preferences,
    catalog: CourseCatalog,
    **kwargs,
) -> Schedule:
    """Run the pipeline and return only the schedule; never raises on shortfall."""
    return generate_schedule(course_ids, preferences, catalog, **kwargs).schedule


def generate_random_schedule(
    course_ids: Sequence[int],
    catalog: CourseCatalog,
    **kwargs,
) -> GenerationResult:
    return generate_schedule(course_ids, Preferences(), catalog, **kwargs)


def regenerate_schedule(
    schedule: Schedule,
    preferences: Preferences,
    catalog: CourseCatalog,
    **kwargs,
) -> GenerationResult:
    """Rerun the pipeline for the courses already present in ``schedule``."""
    return generate_schedule(schedule.course_ids(), preferences, catalog, **kwargs)
