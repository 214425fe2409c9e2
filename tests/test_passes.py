from __future__ import annotations

from helpers import block, is_contiguous
from schedgen.data.registry import SlotLedger
from schedgen.models.schedule import Schedule
from schedgen.scheduler.compact import compact_days
from schedgen.scheduler.gaps import minimize_gaps
from schedgen.validate.checks import validate_schedule


def test_gap_minimizer_packs_each_day_from_its_first_slot() -> None:
    blocks = [
        block(1, "Monday", 7),
        block(2, "Monday", 2),
        block(3, "Monday", 5),
        block(1, "Tuesday", 9),
        block(2, "Thursday", 3),
        block(3, "Thursday", 8),
    ]
    out, ledger, _ = minimize_gaps(blocks, SlotLedger().rebuilt(blocks))
    monday = sorted((b.time_slot_id, b.course_id) for b in out if b.day == "Monday")
    assert monday == [(2, 2), (3, 3), (4, 1)]
    assert [b.time_slot_id for b in out if b.day == "Tuesday"] == [9]
    assert sorted(b.time_slot_id for b in out if b.day == "Thursday") == [3, 4]
    assert ledger.used == {b.key for b in out}


def test_gap_minimizer_runs_are_contiguous_and_start_at_the_old_minimum() -> None:
    blocks = [block(i, day, slot) for i, (day, slot) in enumerate(
        [("Monday", 3), ("Monday", 9), ("Wednesday", 1), ("Wednesday", 4), ("Wednesday", 6)]
    )]
    out, _, _ = minimize_gaps(blocks, SlotLedger())
    for day in ("Monday", "Wednesday"):
        before = [b.time_slot_id for b in blocks if b.day == day]
        after = [b.time_slot_id for b in out if b.day == day]
        assert is_contiguous(after)
        assert min(after) == min(before)


def test_gap_minimizer_may_land_on_a_blocked_slot() -> None:
    # Compaction ignores blocked cells; the move is kept and reported
    blocks = [block(1, "Monday", 1), block(2, "Monday", 3)]
    ledger = SlotLedger([("Monday", 2)]).rebuilt(blocks)
    out, ledger, audit = minimize_gaps(blocks, ledger)
    assert sorted(b.time_slot_id for b in out) == [1, 2]
    assert ("Monday", 2) in ledger.blocked
    assert any("blocked slot" in line for line in audit)


def test_day_compactor_moves_pair_onto_first_day() -> None:
    blocks = [block(1, "Monday", 5), block(1, "Wednesday", 7)]
    out, _, _ = compact_days(blocks, SlotLedger())
    assert [(b.day, b.time_slot_id) for b in out] == [("Monday", 1), ("Monday", 2)]


def test_day_compactor_reserves_pairs_in_course_order() -> None:
    blocks = [
        block(1, "Monday", 5),
        block(2, "Monday", 8),
        block(1, "Wednesday", 7),
        block(2, "Tuesday", 3),
    ]
    out, reserved, _ = compact_days(blocks, SlotLedger())
    placed = {(b.course_id, b.day, b.time_slot_id) for b in out}
    assert placed == {(1, "Monday", 1), (1, "Monday", 2), (2, "Monday", 3), (2, "Monday", 4)}
    assert reserved.used == {("Monday", 1), ("Monday", 2), ("Monday", 3), ("Monday", 4)}


def test_day_compactor_leaves_course_when_no_pair_is_free() -> None:
    # Single-block courses on even slots break every consecutive pair
    singles = [block(cid, "Monday", slot) for cid, slot in [(10, 2), (11, 4), (12, 6), (13, 8)]]
    pair = [block(1, "Monday", 9), block(1, "Tuesday", 1)]
    out, _, audit = compact_days(singles + pair, SlotLedger())
    assert [b for b in out if b.course_id == 1] == pair
    assert [b for b in out if b.course_id != 1] == singles
    assert any("left in place" in line for line in audit)


def test_day_compactor_passes_other_block_counts_through() -> None:
    blocks = [block(1, "Friday", 4), block(2, "Monday", 1), block(2, "Tuesday", 2), block(2, "Thursday", 9)]
    out, _, _ = compact_days(blocks, SlotLedger())
    assert out == blocks


def test_day_compactor_ignores_cells_of_courses_not_yet_visited() -> None:
    # Only this pass's own reservations are consulted
    blocks = [block(1, "Monday", 5), block(1, "Tuesday", 3), block(2, "Monday", 1)]
    out, _, _ = compact_days(blocks, SlotLedger().rebuilt(blocks))
    placed = {(b.course_id, b.day, b.time_slot_id) for b in out}
    assert (1, "Monday", 1) in placed
    assert (1, "Monday", 2) in placed
    assert (2, "Monday", 1) in placed
    assert validate_schedule(Schedule(id="s", blocks=tuple(out)))["clash_count"] == 1


def test_day_compactor_may_land_on_a_blocked_slot() -> None:
    blocks = [block(1, "Monday", 5), block(1, "Wednesday", 7)]
    ledger = SlotLedger([("Monday", 1)]).rebuilt(blocks)
    out, reserved, audit = compact_days(blocks, ledger)
    assert [(b.day, b.time_slot_id) for b in out] == [("Monday", 1), ("Monday", 2)]
    assert ("Monday", 1) in reserved.blocked
    assert any("now on blocked slot Monday 1" in line for line in audit)
