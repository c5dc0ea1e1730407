"""Marshmallow schemas for the versioned REST API."""

from .exercise import (
    ExerciseSchema,
    exercise_list_schema,
    exercise_schema,
    load_exercise,
)

__all__ = ["ExerciseSchema", "exercise_list_schema", "exercise_schema", "load_exercise"]
