from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from exercise_library.domain import Exercise, MuscleGroup, RepRange, TargetMuscleFactor


@dataclass(frozen=True, slots=True)
class ExerciseDto:
    """
    Transfer shape exchanged with API clients.

    :param name: Display name.
    :type name: str
    :param notes: Free-form notes, empty by default.
    :type notes: str
    :param target_muscles: Muscle → emphasis mapping.
    :type target_muscles: Mapping[MuscleGroup, TargetMuscleFactor]
    :param preferred_rep_ranges: Recommended rep bands.
    :type preferred_rep_ranges: frozenset[RepRange]
    :param id: Storage id; ``None`` until created.
    :type id: int | None
    """

    name: str
    notes: str = ""
    target_muscles: Mapping[MuscleGroup, TargetMuscleFactor] = field(default_factory=dict)
    preferred_rep_ranges: frozenset[RepRange] = frozenset()
    id: int | None = None

    def __post_init__(self) -> None:
        # collections are held as read-only views
        object.__setattr__(self, "target_muscles", MappingProxyType(dict(self.target_muscles)))
        object.__setattr__(self, "preferred_rep_ranges", frozenset(self.preferred_rep_ranges))

    def __hash__(self) -> int:
        return hash(
            (
                self.name,
                self.notes,
                frozenset(self.target_muscles.items()),
                self.preferred_rep_ranges,
                self.id,
            )
        )

    @classmethod
    def build(
        cls,
        *,
        name: str,
        notes: str = "",
        target_muscles: Mapping[MuscleGroup, TargetMuscleFactor] | None = None,
        preferred_rep_ranges: Iterable[RepRange] | None = None,
        id: int | None = None,
    ) -> ExerciseDto:
        """Build a DTO owning private copies of the given collections."""
        return cls(
            name=name,
            notes=notes,
            target_muscles=dict(target_muscles or {}),
            preferred_rep_ranges=frozenset(preferred_rep_ranges or ()),
            id=id,
        )

    @classmethod
    def from_entity(cls, exercise: Exercise) -> ExerciseDto:
        return cls.build(
            name=exercise.name,
            notes=exercise.notes,
            target_muscles=exercise.target_muscles,
            preferred_rep_ranges=exercise.preferred_rep_ranges,
            id=exercise.id,
        )
