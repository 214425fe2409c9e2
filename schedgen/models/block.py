from dataclasses import dataclass


@dataclass(frozen=True)
class ScheduleBlock:
    course_id: int
    course_code: str
    course_name: str
    day: str
    time_slot_id: int
    professor: str | None = None

    @property
    def key(self) -> tuple[str, int]:
        return (self.day, self.time_slot_id)
