"""
In-memory UnitOfWork over :class:`InMemoryExerciseStore`.
"""

from __future__ import annotations

from exercise_library.services._shared.ports.exercise_store import InMemoryExerciseStore
from exercise_library.uow.base import UnitOfWork


class InMemoryUnitOfWork(UnitOfWork):
    """
    Serialize use cases on the store lock and undo their writes on rollback.

    Entering the scope takes the store lock and a snapshot of its contents;
    a rollback restores that snapshot. The lock is released on exit.
    """

    def __init__(self, store: InMemoryExerciseStore) -> None:
        self.exercises = store
        self._snapshot: tuple[dict, int] | None = None

    def __enter__(self) -> InMemoryUnitOfWork:
        self.exercises.lock.acquire()
        self._snapshot = (self.exercises.snapshot(), self.exercises.next_id)
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        try:
            if exc_type is None:
                self.commit()
            else:
                self.rollback()
        finally:
            self._snapshot = None
            self.exercises.lock.release()

    def commit(self) -> None:
        # Writes already landed in the store; keep them
        self._snapshot = (self.exercises.snapshot(), self.exercises.next_id)

    def rollback(self) -> None:
        if self._snapshot is not None:
            rows, next_id = self._snapshot
            self.exercises.restore(rows, next_id)
