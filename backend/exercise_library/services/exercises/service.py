# comments in English; strict reST docstrings
from __future__ import annotations

import dataclasses
import logging

from exercise_library.domain import Exercise
from exercise_library.services._shared.base import BaseService
from exercise_library.services._shared.errors import NotFoundError
from exercise_library.services.exercises.dto import ExerciseDto

log = logging.getLogger(__name__)


class ExerciseService(BaseService):
    """
    Application service coordinating the **exercise catalog**.

    Responsibilities
    ----------------
    - Create, read, fully replace and soft-delete exercises.
    - Map between :class:`ExerciseDto` and the stored :class:`Exercise`,
      copying collections so neither side aliases the other.

    Notes
    -----
    - Framework-agnostic; no Flask/HTTP types leak here.
    - Listing hides soft-deleted exercises, lookup by id does not. A client
      holding a direct id can still read an exercise after it was deleted.
    - Update and delete on an unknown id are silent no-ops, while
      :meth:`get_by_id` raises :class:`NotFoundError`.
    """

    # ------------------------------------------------------------------ #
    # Read
    # ------------------------------------------------------------------ #

    def get_all(self) -> list[ExerciseDto]:
        """
        List every exercise that has not been soft-deleted.

        :returns: DTOs ordered by id.
        :rtype: list[:class:`ExerciseDto`]
        """
        with self.ro_uow() as uow:
            return [ExerciseDto.from_entity(e) for e in uow.exercises.list_active()]

    def get_by_id(self, exercise_id: int) -> ExerciseDto:
        """
        Retrieve a single exercise by id, deleted or not.

        :param exercise_id: Exercise identifier.
        :type exercise_id: int
        :returns: Exercise projection.
        :rtype: :class:`ExerciseDto`
        :raises NotFoundError: When no record with that id exists.
        """
        with self.ro_uow() as uow:
            exercise = uow.exercises.find_by_id(exercise_id)
            if exercise is None:
                raise NotFoundError("Exercise", exercise_id)
            return ExerciseDto.from_entity(exercise)

    # ------------------------------------------------------------------ #
    # Create
    # ------------------------------------------------------------------ #

    def create_exercise(self, dto: ExerciseDto) -> ExerciseDto:
        """
        Persist a new exercise built from ``dto``.

        Any ``id`` carried by ``dto`` is ignored; storage assigns a fresh one.

        :param dto: Exercise contents.
        :type dto: :class:`ExerciseDto`
        :returns: ``dto`` with the generated ``id``.
        :rtype: :class:`ExerciseDto`
        """
        exercise = Exercise(
            name=dto.name,
            notes=dto.notes,
            target_muscles=dict(dto.target_muscles),
            preferred_rep_ranges=set(dto.preferred_rep_ranges),
        )
        with self.rw_uow() as uow:
            saved = uow.exercises.upsert(exercise)
        log.info("exercise.created", extra={"exercise_id": saved.id})
        return dataclasses.replace(dto, id=saved.id)

    # ------------------------------------------------------------------ #
    # Update
    # ------------------------------------------------------------------ #

    def update_exercise(self, exercise_id: int, dto: ExerciseDto) -> None:
        """
        Replace name, notes, target muscles and rep ranges of an exercise.

        Collections are replaced wholesale, never merged. The deletion flag is
        left untouched. Unknown ids are ignored.

        :param exercise_id: Exercise identifier.
        :type exercise_id: int
        :param dto: New contents; its ``id`` is ignored.
        :type dto: :class:`ExerciseDto`
        """
        with self.rw_uow() as uow:
            exercise = uow.exercises.find_by_id(exercise_id, for_update=True)
            if exercise is None:
                log.info("exercise.update.miss", extra={"exercise_id": exercise_id})
                return
            exercise.replace_contents(
                name=dto.name,
                notes=dto.notes,
                target_muscles=dto.target_muscles,
                preferred_rep_ranges=dto.preferred_rep_ranges,
            )
            uow.exercises.upsert(exercise)
        log.info("exercise.updated", extra={"exercise_id": exercise_id})

    # ------------------------------------------------------------------ #
    # Delete
    # ------------------------------------------------------------------ #

    def delete_exercise(self, exercise_id: int) -> None:
        """
        Soft-delete an exercise; idempotent and silent for unknown ids.

        :param exercise_id: Exercise identifier.
        :type exercise_id: int
        """
        with self.rw_uow() as uow:
            exercise = uow.exercises.find_by_id(exercise_id, for_update=True)
            if exercise is None:
                log.info("exercise.delete.miss", extra={"exercise_id": exercise_id})
                return
            if exercise.deleted:
                return
            exercise.mark_deleted()
            uow.exercises.upsert(exercise)
        log.info("exercise.deleted", extra={"exercise_id": exercise_id})
