"""Exercise catalog domain: enumerations and the plain ``Exercise`` record."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum


class MuscleGroup(str, Enum):
    """Anatomical targets an exercise can train."""

    QUADS = "QUADS"
    HAMSTRINGS = "HAMSTRINGS"
    CALVES = "CALVES"
    GLUTES = "GLUTES"
    BACK = "BACK"
    TRAPS = "TRAPS"
    FRONT_DELTS = "FRONT_DELTS"
    SIDE_DELTS = "SIDE_DELTS"
    REAR_DELTS = "REAR_DELTS"
    PECS = "PECS"
    ABS = "ABS"
    BICEP = "BICEP"
    TRICEP = "TRICEP"
    FOREARMS = "FOREARMS"


class TargetMuscleFactor(Enum):
    """Relative emphasis of a muscle: primary (1.0) or secondary (0.5)."""

    ONE = 1.0
    POINT_FIVE = 0.5

    @property
    def factor(self) -> float:
        return float(self.value)

    @classmethod
    def parse(cls, raw: object) -> TargetMuscleFactor:
        """Resolve a factor from its name (``"ONE"``) or number (``1.0``).

        :param raw: Enum member, member name, or numeric factor.
        :returns: Matching member.
        :raises ValueError: When ``raw`` names no member.
        """
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, str):
            try:
                return cls[raw.strip().upper()]
            except KeyError:
                pass
        # bool is an int subclass; True must not resolve to ONE
        elif isinstance(raw, int | float) and not isinstance(raw, bool):
            for member in cls:
                if member.value == float(raw):
                    return member
        raise ValueError(f"Unknown target muscle factor: {raw!r}")


class RepRange(Enum):
    """Recommended repetitions-per-set bands as ``(low, high)`` pairs."""

    ONE_TO_THREE = (1, 3)
    THREE_TO_SIX = (3, 6)
    FIVE_TO_TEN = (5, 10)
    TEN_TO_TWENTY = (10, 20)
    TEN_TO_FIFTEEN = (10, 15)
    TWENTY_TO_THIRTY = (20, 30)

    @property
    def low(self) -> int:
        return self.value[0]

    @property
    def high(self) -> int:
        return self.value[1]


_REP_RANGE_ORDER = {member: index for index, member in enumerate(RepRange)}


def sorted_rep_ranges(ranges: Iterable[RepRange]) -> list[RepRange]:
    """Return rep ranges in declaration order (stable output for JSON)."""
    return sorted(ranges, key=_REP_RANGE_ORDER.__getitem__)


@dataclass(slots=True)
class Exercise:
    """
    Catalog entry for a strength-training exercise.

    :param name: Display name.
    :param notes: Free-form coaching notes.
    :param target_muscles: Muscle → emphasis mapping.
    :param preferred_rep_ranges: Recommended rep bands.
    :param deleted: Soft-delete marker; once set it is never cleared.
    :param id: Storage-assigned identifier, ``None`` until first persisted.
    """

    name: str
    notes: str = ""
    target_muscles: dict[MuscleGroup, TargetMuscleFactor] = field(default_factory=dict)
    preferred_rep_ranges: set[RepRange] = field(default_factory=set)
    deleted: bool = False
    id: int | None = None

    def replace_contents(
        self,
        *,
        name: str,
        notes: str,
        target_muscles: Mapping[MuscleGroup, TargetMuscleFactor],
        preferred_rep_ranges: Iterable[RepRange],
    ) -> None:
        """Overwrite every editable attribute; collections are replaced, not merged."""
        self.name = name
        self.notes = notes
        self.target_muscles = dict(target_muscles)
        self.preferred_rep_ranges = set(preferred_rep_ranges)

    def mark_deleted(self) -> None:
        self.deleted = True

    def copy(self) -> Exercise:
        """Return a detached copy that shares no mutable collections."""
        return Exercise(
            name=self.name,
            notes=self.notes,
            target_muscles=dict(self.target_muscles),
            preferred_rep_ranges=set(self.preferred_rep_ranges),
            deleted=self.deleted,
            id=self.id,
        )
