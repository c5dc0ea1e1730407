"""
Unit tests for InMemoryUnitOfWork.
"""

from __future__ import annotations

import threading

import pytest
from exercise_library.domain import Exercise
from exercise_library.services._shared.ports import InMemoryExerciseStore
from exercise_library.uow import InMemoryUnitOfWork


def _lock_free_elsewhere(store: InMemoryExerciseStore) -> bool:
    """Return whether another thread can take the store lock right now."""
    result: list[bool] = []

    def try_acquire() -> None:
        acquired = store.lock.acquire(blocking=False)
        if acquired:
            store.lock.release()
        result.append(acquired)

    t = threading.Thread(target=try_acquire)
    t.start()
    t.join()
    return result[0]


class TestInMemoryUnitOfWork:
    @pytest.fixture()
    def store(self) -> InMemoryExerciseStore:
        return InMemoryExerciseStore()

    def test_commits_on_success(self, store):
        with InMemoryUnitOfWork(store) as uow:
            uow.exercises.upsert(Exercise(name="Dip"))

        assert [e.name for e in store.list_active()] == ["Dip"]

    def test_rolls_back_on_exception(self, store):
        with InMemoryUnitOfWork(store) as uow:
            uow.exercises.upsert(Exercise(name="Kept"))

        with pytest.raises(RuntimeError), InMemoryUnitOfWork(store) as uow:
            uow.exercises.upsert(Exercise(name="Discarded"))
            raise RuntimeError("boom")

        assert [e.name for e in store.list_active()] == ["Kept"]
        # the id handed out inside the failed scope is reused
        assert store.next_id == 2

    def test_holds_lock_for_the_whole_scope(self, store):
        with InMemoryUnitOfWork(store):
            assert _lock_free_elsewhere(store) is False
        assert _lock_free_elsewhere(store) is True

    def test_releases_lock_after_failure(self, store):
        with pytest.raises(ValueError), InMemoryUnitOfWork(store):
            raise ValueError("boom")
        assert _lock_free_elsewhere(store) is True
