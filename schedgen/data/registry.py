from __future__ import annotations

from typing import Iterable, Set, Tuple

from ..models.block import ScheduleBlock

Key = Tuple[str, int]  # (day, time_slot_id)


class SlotLedger:
    """Request-scoped record of which (day, slot) cells are used or blocked.

    One ledger belongs to one generation call. Each pipeline stage takes the
    ledger and hands back the one matching its output placement.
    """

    def __init__(self, blocked: Iterable[Key] = ()):
        self.blocked: Set[Key] = set(blocked)
        self.used: Set[Key] = set()

    def can_place(self, day: str, slot_id: int) -> bool:
        key = (day, slot_id)
        return key not in self.used and key not in self.blocked

    def place(self, day: str, slot_id: int) -> None:
        self.used.add((day, slot_id))

    def is_blocked(self, day: str, slot_id: int) -> bool:
        return (day, slot_id) in self.blocked

    def rebuilt(self, blocks: Iterable[ScheduleBlock]) -> "SlotLedger":
        ledger = SlotLedger(self.blocked)
        for b in blocks:
            ledger.place(b.day, b.time_slot_id)
        return ledger
