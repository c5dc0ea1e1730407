from __future__ import annotations

import threading
from typing import Protocol

from exercise_library.domain import Exercise


class ExerciseStore(Protocol):
    """
    Persistence port for the exercise catalog.

    Implementations hand out detached copies: changes to a returned
    :class:`Exercise` reach storage only through :meth:`upsert`.
    """

    def list_active(self) -> list[Exercise]: ...
    def find_by_id(self, exercise_id: int, *, for_update: bool = False) -> Exercise | None: ...
    def upsert(self, exercise: Exercise) -> Exercise: ...


class InMemoryExerciseStore(ExerciseStore):
    """Process-local store keyed by id; ids start at 1."""

    def __init__(self) -> None:
        self._rows: dict[int, Exercise] = {}
        self._next_id = 1
        # Held by InMemoryUnitOfWork for the whole scope of a use case
        self.lock = threading.RLock()

    def list_active(self) -> list[Exercise]:
        with self.lock:
            return [row.copy() for _, row in sorted(self._rows.items()) if not row.deleted]

    def find_by_id(self, exercise_id: int, *, for_update: bool = False) -> Exercise | None:
        # for_update is implicit: the unit of work already holds the lock
        with self.lock:
            row = self._rows.get(exercise_id)
            return row.copy() if row is not None else None

    def upsert(self, exercise: Exercise) -> Exercise:
        with self.lock:
            if exercise.id is None:
                exercise.id = self._next_id
                self._next_id += 1
            elif exercise.id >= self._next_id:
                self._next_id = exercise.id + 1
            self._rows[exercise.id] = exercise.copy()
            return exercise

    def snapshot(self) -> dict[int, Exercise]:
        """Return copies of every stored record, deleted ones included."""
        with self.lock:
            return {key: row.copy() for key, row in self._rows.items()}

    def restore(self, rows: dict[int, Exercise], next_id: int) -> None:
        with self.lock:
            self._rows = rows
            self._next_id = next_id

    @property
    def next_id(self) -> int:
        return self._next_id
