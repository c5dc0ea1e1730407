"""SQLAlchemy adapter for the :class:`ExerciseStore` port."""

from __future__ import annotations

from typing import Any

from sqlalchemy import Select
from sqlalchemy.orm import selectinload

from exercise_library.domain import Exercise
from exercise_library.models.exercise import (
    ExerciseRepRangeRow,
    ExerciseRow,
    ExerciseTargetMuscleRow,
)
from exercise_library.repositories.base import BaseRepository
from exercise_library.services._shared.ports.exercise_store import ExerciseStore

# exercises.id is a 32-bit INTEGER on PostgreSQL
ID_MIN, ID_MAX = -(2**31), 2**31 - 1


class ExerciseRepository(BaseRepository[ExerciseRow], ExerciseStore):
    """
    Persist :class:`~exercise_library.domain.Exercise` records in three tables.

    Rows never leave this class: callers receive detached domain records and
    hand them back to :meth:`upsert`.
    """

    model = ExerciseRow

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        return stmt.options(
            selectinload(ExerciseRow.target_muscles),
            selectinload(ExerciseRow.rep_ranges),
        )

    # ------------------------------------------------------------------ #
    # Port operations
    # ------------------------------------------------------------------ #

    def list_active(self) -> list[Exercise]:
        """Return every exercise whose ``deleted`` flag is false, by id."""
        stmt = self._select().where(ExerciseRow.deleted.is_(False)).order_by(ExerciseRow.id.asc())
        return [self._to_domain(row) for row in self.session.execute(stmt).scalars()]

    def find_by_id(self, exercise_id: int, *, for_update: bool = False) -> Exercise | None:
        """Return the exercise regardless of its deletion state, or ``None``.

        Ids the column cannot hold are reported as missing instead of being
        sent to the driver, which would reject them.
        """
        if not ID_MIN <= exercise_id <= ID_MAX:
            return None
        row = self.get(exercise_id, for_update=for_update)
        return self._to_domain(row) if row is not None else None

    def upsert(self, exercise: Exercise) -> Exercise:
        """
        Insert ``exercise`` when it has no id, otherwise overwrite that row.

        Owned collections are replaced wholesale. The assigned id is written
        back onto ``exercise``.

        :param exercise: Record to persist.
        :returns: The same record, with ``id`` populated.
        """
        row = self.get(exercise.id) if exercise.id is not None else None
        if row is None:
            row = ExerciseRow(id=exercise.id)
            self._apply(row, exercise)
            self.add(row, flush=True)
        else:
            self._apply(row, exercise)
            self.flush()
        exercise.id = row.id
        return exercise

    # ------------------------------------------------------------------ #
    # Mapping
    # ------------------------------------------------------------------ #

    def _apply(self, row: ExerciseRow, exercise: Exercise) -> None:
        row.name = exercise.name
        row.notes = exercise.notes
        row.deleted = exercise.deleted

        if row.target_muscles or row.rep_ranges:
            # Orphans must be deleted before re-inserting the same composite keys
            row.target_muscles.clear()
            row.rep_ranges.clear()
            self.session.flush()

        row.target_muscles.extend(
            ExerciseTargetMuscleRow(muscle=muscle, factor=factor)
            for muscle, factor in exercise.target_muscles.items()
        )
        row.rep_ranges.extend(
            ExerciseRepRangeRow(rep_range=rep_range) for rep_range in exercise.preferred_rep_ranges
        )

    @staticmethod
    def _to_domain(row: ExerciseRow) -> Exercise:
        return Exercise(
            id=row.id,
            name=row.name,
            notes=row.notes or "",
            target_muscles={tm.muscle: tm.factor for tm in row.target_muscles},
            preferred_rep_ranges={rr.rep_range for rr in row.rep_ranges},
            deleted=bool(row.deleted),
        )
