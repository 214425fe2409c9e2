from __future__ import annotations

from pathlib import Path
from typing import Iterable, List

from schedgen.data.catalog import CourseCatalog
from schedgen.data.loader import load_data
from schedgen.data.professors import ProfessorDirectory
from schedgen.models.block import ScheduleBlock
from schedgen.models.period import DAYS, TIME_SLOTS

ROOT = Path(__file__).resolve().parents[1]


def real_catalog() -> CourseCatalog:
    return CourseCatalog(load_data(ROOT).courses)


def real_professors() -> ProfessorDirectory:
    return ProfessorDirectory(load_data(ROOT).professors)


def all_cells() -> List[tuple[str, int]]:
    return [(d, s.id) for d in DAYS for s in TIME_SLOTS]


def block(course_id: int, day: str, slot: int, code: str | None = None) -> ScheduleBlock:
    code = code or f"C{course_id}"
    return ScheduleBlock(course_id, code, f"Course {course_id}", day, slot)


def is_contiguous(slot_ids: Iterable[int]) -> bool:
    ids = sorted(slot_ids)
    return ids == list(range(ids[0], ids[0] + len(ids)))
