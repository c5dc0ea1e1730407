"""SQLAlchemy repositories backing the storage ports."""

from exercise_library.repositories.exercise import ExerciseRepository

__all__ = ["ExerciseRepository"]
