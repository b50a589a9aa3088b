"""
Shared compute infrastructure for pylinalg.

Submodules:
    timing: Execution timing utilities
    tolerances: Tolerance tiers for numerical comparison
"""

from pylinalg.core.compute.timing import Timer, timed
from pylinalg.core.compute.tolerances import (
    ToleranceTier,
    EXACT,
    FP64,
    FP64_SERIES,
    select_tolerance,
)

__all__ = [
    # Timing
    "Timer",
    "timed",
    # Tolerances
    "ToleranceTier",
    "EXACT",
    "FP64",
    "FP64_SERIES",
    "select_tolerance",
]
