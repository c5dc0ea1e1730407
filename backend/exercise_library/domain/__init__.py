"""Framework-free domain types of the exercise catalog."""

from .exercise import (
    Exercise,
    MuscleGroup,
    RepRange,
    TargetMuscleFactor,
    sorted_rep_ranges,
)

__all__ = [
    "Exercise",
    "MuscleGroup",
    "RepRange",
    "TargetMuscleFactor",
    "sorted_rep_ranges",
]
