from .catalog import CourseCatalog
from .loader import LoadedData, load_data
from .professors import ProfessorDirectory
from .registry import SlotLedger

__all__ = ["CourseCatalog", "ProfessorDirectory", "SlotLedger", "LoadedData", "load_data"]
