from __future__ import annotations

import dataclasses
import random
from collections import defaultdict
from datetime import datetime

import pytest

from helpers import all_cells, is_contiguous, real_catalog
from schedgen.models.preferences import BlockedTimeSlot, Preferences
from schedgen.scheduler import (
    PartiallySatisfied,
    Satisfied,
    assemble_schedule,
    build_schedule,
    generate_random_schedule,
    generate_schedule,
    regenerate_schedule,
)
from schedgen.scheduler.outcome import ATTEMPTS_EXHAUSTED, UNKNOWN_COURSE


def test_three_courses_with_gap_minimization() -> None:
    prefs = Preferences(optimizations=["minimize-gaps"])
    result = generate_schedule([1, 2, 3], prefs, real_catalog(), rng=random.Random(42))
    blocks = result.schedule.blocks
    assert len(blocks) == 6
    assert len({b.key for b in blocks}) == 6
    by_day = defaultdict(list)
    for b in blocks:
        by_day[b.day].append(b.time_slot_id)
    for day, slots in by_day.items():
        assert is_contiguous(slots), f"{day} not contiguous: {slots}"
    assert isinstance(result.outcome, Satisfied)


def test_invariants_hold_over_unseeded_runs() -> None:
    catalog = real_catalog()
    prefs = Preferences(optimizations=["minimize-gaps"])
    placements = set()
    for _ in range(50):
        schedule = build_schedule([1, 2, 3, 4], prefs, catalog)
        keys = [b.key for b in schedule.blocks]
        assert len(keys) == 8
        assert len(keys) == len(set(keys))
        placements.add(tuple(sorted(keys)))
    assert len(placements) > 1


def test_same_seed_gives_same_placement() -> None:
    catalog = real_catalog()
    prefs = Preferences(optimizations=["compact-days"])
    a = generate_schedule([4, 9, 14], prefs, catalog, rng=random.Random(3)).schedule
    b = generate_schedule([4, 9, 14], prefs, catalog, rng=random.Random(3)).schedule
    assert a.blocks == b.blocks


def test_compact_days_groups_each_course_on_one_day() -> None:
    prefs = Preferences(optimizations=["compact-days"])
    schedule = generate_schedule([1, 2, 3], prefs, real_catalog(), rng=random.Random(9)).schedule
    for cid in [1, 2, 3]:
        first, second = schedule.iter_course(cid)
        assert first.day == second.day
        assert second.time_slot_id == first.time_slot_id + 1


def test_partial_outcome_names_each_unfulfilled_course() -> None:
    cells = all_cells()
    prefs = Preferences(blocked_time_slots=[BlockedTimeSlot(d, s) for d, s in cells[:43]])
    result = generate_schedule([1, 2, 3, 777], prefs, real_catalog(), rng=random.Random(1))
    assert isinstance(result.outcome, PartiallySatisfied)
    reasons = {s.course_id: s.reason for s in result.outcome.unfulfilled}
    assert reasons[777] == UNKNOWN_COURSE
    assert ATTEMPTS_EXHAUSTED in reasons.values()
    assert len(result.schedule.blocks) <= 2


def test_random_schedule_uses_empty_preferences() -> None:
    result = generate_random_schedule([5, 6], real_catalog(), rng=random.Random(0))
    assert len(result.schedule.blocks) == 4
    assert result.outcome.satisfied


def test_regenerate_builds_a_new_schedule_for_the_same_courses() -> None:
    catalog = real_catalog()
    prefs = Preferences(optimizations=["minimize-gaps"])
    first = generate_schedule([3, 1, 2], prefs, catalog).schedule
    second = regenerate_schedule(first, prefs, catalog).schedule
    assert second is not first
    assert set(second.course_ids()) == {1, 2, 3}
    assert len(second.blocks) == 6


def test_schedule_is_immutable() -> None:
    schedule = build_schedule([1], Preferences(), real_catalog(), rng=random.Random(0))
    with pytest.raises(dataclasses.FrozenInstanceError):
        schedule.id = "other"  # type: ignore[misc]
    assert isinstance(schedule.blocks, tuple)


def test_assembler_stamps_id_and_time() -> None:
    now = datetime(2025, 3, 10, 8, 30)
    schedule = assemble_schedule([], clock=lambda: now)
    assert schedule.id.startswith(f"schedule-{int(now.timestamp() * 1000)}-")
    assert schedule.created_at == now
    assert schedule.blocks == ()


def test_schedule_queries() -> None:
    schedule = build_schedule([1, 2, 3], Preferences(), real_catalog(), rng=random.Random(6))
    for b in schedule.blocks:
        assert schedule.block_at(b.day, b.time_slot_id) == b
        day_slots = [x.time_slot_id for x in schedule.blocks_for_day(b.day)]
        assert day_slots == sorted(day_slots)
    assert schedule.total_weekly_hours() == pytest.approx(6 * 80 / 60, abs=0.01)
    assert schedule.course_ids() == list(dict.fromkeys(b.course_id for b in schedule.blocks))
