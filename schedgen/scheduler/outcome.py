from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from typing import Iterable, List, Tuple, Union

from ..data.catalog import CourseCatalog
from ..models.block import ScheduleBlock

UNKNOWN_COURSE = "unknown-course"
ATTEMPTS_EXHAUSTED = "attempts-exhausted"


@dataclass(frozen=True)
class Shortfall:
    course_id: int
    placed: int
    target: int
    reason: str


@dataclass(frozen=True)
class Satisfied:
    satisfied = True


@dataclass(frozen=True)
class PartiallySatisfied:
    unfulfilled: Tuple[Shortfall, ...]
    satisfied = False


PlacementOutcome = Union[Satisfied, PartiallySatisfied]


def summarize_outcome(
    course_ids: Iterable[int],
    blocks: Iterable[ScheduleBlock],
    catalog: CourseCatalog,
    target: int,
) -> PlacementOutcome:
    placed = Counter(b.course_id for b in blocks)
    short: List[Shortfall] = []
    for cid in dict.fromkeys(course_ids):
        if cid not in catalog:
            short.append(Shortfall(cid, 0, target, UNKNOWN_COURSE))
        elif placed.get(cid, 0) < target:
            short.append(Shortfall(cid, placed.get(cid, 0), target, ATTEMPTS_EXHAUSTED))
    if short:
        return PartiallySatisfied(tuple(short))
    return Satisfied()
