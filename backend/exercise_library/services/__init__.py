"""Service layer: framework-agnostic use cases over units of work.

Import concrete services from their subpackages, e.g.
``from exercise_library.services.exercises import ExerciseService``.
"""
