from exercise_library.models.exercise import (
    ExerciseRepRangeRow,
    ExerciseRow,
    ExerciseTargetMuscleRow,
)

__all__ = [
    "ExerciseRepRangeRow",
    "ExerciseRow",
    "ExerciseTargetMuscleRow",
]
