"""Ports (abstract dependencies) consumed by application services."""

from .exercise_store import ExerciseStore, InMemoryExerciseStore

__all__ = ["ExerciseStore", "InMemoryExerciseStore"]
