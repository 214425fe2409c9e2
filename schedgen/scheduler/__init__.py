from .assign import assign_slots
from .compact import compact_days
from .gaps import minimize_gaps
from .outcome import PartiallySatisfied, PlacementOutcome, Satisfied, Shortfall
from .pipeline import (
    GenerationResult,
    assemble_schedule,
    build_schedule,
    generate_random_schedule,
    generate_schedule,
    regenerate_schedule,
)

__all__ = [
    "assign_slots",
    "minimize_gaps",
    "compact_days",
    "assemble_schedule",
    "generate_schedule",
    "build_schedule",
    "generate_random_schedule",
    "regenerate_schedule",
    "GenerationResult",
    "PlacementOutcome",
    "Satisfied",
    "PartiallySatisfied",
    "Shortfall",
]
