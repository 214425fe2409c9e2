from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, Tuple

from ..errors import PreferenceError
from .period import DAY_CODES, SLOTS_BY_ID, is_weekday

MINIMIZE_GAPS = "minimize-gaps"
MORNING_CLASSES = "morning-classes"
AFTERNOON_CLASSES = "afternoon-classes"
COMPACT_DAYS = "compact-days"
SPREAD_DAYS = "spread-days"  # accepted, no placement effect
NO_FRIDAYS = "no-fridays"

OPTIMIZATIONS = (
    MINIMIZE_GAPS,
    MORNING_CLASSES,
    AFTERNOON_CLASSES,
    COMPACT_DAYS,
    SPREAD_DAYS,
    NO_FRIDAYS,
)


@dataclass(frozen=True)
class BlockedTimeSlot:
    day: str
    time_slot_id: int
    reason: str | None = None

    @property
    def key(self) -> Tuple[str, int]:
        return (self.day, self.time_slot_id)


@dataclass(frozen=True)
class ProfessorPreference:
    course_id: int
    professor_id: str


def _entries(data: Dict[str, Any], key: str) -> List[Dict[str, Any]]:
    items = data.get(key) or []
    if not isinstance(items, list):
        raise PreferenceError(f"{key!r} must be a list")
    for raw in items:
        if not isinstance(raw, dict):
            raise PreferenceError(f"Entries of {key!r} must be objects, got {raw!r}")
    return items


@dataclass
class Preferences:
    blocked_time_slots: List[BlockedTimeSlot] = field(default_factory=list)
    optimizations: List[str] = field(default_factory=list)
    professor_preferences: List[ProfessorPreference] = field(default_factory=list)

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "Preferences":
        data = data or {}
        if not isinstance(data, dict):
            raise PreferenceError(f"Preferences must be an object, got {type(data).__name__}")
        blocked: List[BlockedTimeSlot] = []
        for raw in _entries(data, "blocked_time_slots"):
            day = raw.get("day")
            try:
                slot_id = int(raw.get("time_slot_id"))
            except (TypeError, ValueError):
                raise PreferenceError(f"Invalid time slot id in blocked slot: {raw!r}") from None
            if not is_weekday(day):
                raise PreferenceError(f"Unknown day in blocked slot: {day!r}")
            if slot_id not in SLOTS_BY_ID:
                raise PreferenceError(f"Time slot out of range: {slot_id}")
            blocked.append(BlockedTimeSlot(day, slot_id, raw.get("reason")))

        optimizations = data.get("optimizations") or []
        if not isinstance(optimizations, list):
            raise PreferenceError("'optimizations' must be a list")
        unknown = [o for o in optimizations if o not in OPTIMIZATIONS]
        if unknown:
            raise PreferenceError(f"Unknown optimization flags: {', '.join(map(str, unknown))}")

        profs: List[ProfessorPreference] = []
        for raw in _entries(data, "professor_preferences"):
            try:
                profs.append(ProfessorPreference(int(raw["course_id"]), str(raw["professor_id"])))
            except (KeyError, TypeError, ValueError):
                raise PreferenceError(f"Invalid professor preference: {raw!r}") from None
        return cls(blocked_time_slots=blocked, optimizations=list(optimizations), professor_preferences=profs)

    def has(self, flag: str) -> bool:
        return flag in self.optimizations

    def blocked_keys(self) -> Set[Tuple[str, int]]:
        return {b.key for b in self.blocked_time_slots}

    def professor_id_for(self, course_id: int) -> str | None:
        for p in self.professor_preferences:
            if p.course_id == course_id:
                return p.professor_id
        return None

    def forbidden_ranges(self) -> List[str]:
        """Blocked slots as "MO 08:30 - 09:50" strings, deduplicated, in input order."""
        out: List[str] = []
        for day, sid in dict.fromkeys(b.key for b in self.blocked_time_slots):
            slot = SLOTS_BY_ID.get(sid)
            code = DAY_CODES.get(day)
            if slot is None or code is None:
                continue
            out.append(f"{code} {slot.start} - {slot.end}")
        return out

    def to_dict(self) -> Dict[str, Any]:
        return {
            "blocked_time_slots": [
                {"day": b.day, "time_slot_id": b.time_slot_id, "reason": b.reason}
                for b in self.blocked_time_slots
            ],
            "optimizations": list(self.optimizations),
            "professor_preferences": [
                {"course_id": p.course_id, "professor_id": p.professor_id}
                for p in self.professor_preferences
            ],
        }
