from .dto import ExerciseDto
from .service import ExerciseService

__all__ = ["ExerciseDto", "ExerciseService"]
