from .checks import validate_schedule
from .report import format_validation_report, write_validation_report

__all__ = ["validate_schedule", "format_validation_report", "write_validation_report"]
