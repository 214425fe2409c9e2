# Re-export common types
from .block import ScheduleBlock
from .course import Course, Professor
from .period import DAYS, TIME_SLOTS, TimeSlot
from .preferences import BlockedTimeSlot, Preferences, ProfessorPreference
from .schedule import Schedule

__all__ = [
    "Course",
    "Professor",
    "TimeSlot",
    "TIME_SLOTS",
    "DAYS",
    "BlockedTimeSlot",
    "ProfessorPreference",
    "Preferences",
    "ScheduleBlock",
    "Schedule",
]
