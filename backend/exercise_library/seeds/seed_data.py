"""Idempotent starter catalog for local development environments."""

from __future__ import annotations

import logging
from typing import Any

from exercise_library.domain import MuscleGroup as M
from exercise_library.domain import RepRange as R
from exercise_library.domain import TargetMuscleFactor as F
from exercise_library.services.exercises.dto import ExerciseDto
from exercise_library.services.exercises.service import ExerciseService

LOGGER = logging.getLogger(__name__)

EXERCISE_FIXTURES: list[dict[str, Any]] = [
    {
        "name": "Back Squat",
        "notes": "Brace before descending; knees track over toes.",
        "target_muscles": {M.QUADS: F.ONE, M.GLUTES: F.POINT_FIVE, M.HAMSTRINGS: F.POINT_FIVE},
        "preferred_rep_ranges": {R.THREE_TO_SIX, R.FIVE_TO_TEN},
    },
    {
        "name": "Romanian Deadlift",
        "notes": "Hinge at the hips, soft knees, bar close to the legs.",
        "target_muscles": {M.HAMSTRINGS: F.ONE, M.GLUTES: F.ONE, M.BACK: F.POINT_FIVE},
        "preferred_rep_ranges": {R.FIVE_TO_TEN},
    },
    {
        "name": "Bench Press",
        "notes": "",
        "target_muscles": {M.PECS: F.ONE, M.TRICEP: F.POINT_FIVE, M.FRONT_DELTS: F.POINT_FIVE},
        "preferred_rep_ranges": {R.ONE_TO_THREE, R.THREE_TO_SIX, R.FIVE_TO_TEN},
    },
    {
        "name": "Pull-Up",
        "notes": "Full hang at the bottom.",
        "target_muscles": {M.BACK: F.ONE, M.BICEP: F.POINT_FIVE, M.FOREARMS: F.POINT_FIVE},
        "preferred_rep_ranges": {R.FIVE_TO_TEN, R.TEN_TO_FIFTEEN},
    },
    {
        "name": "Overhead Press",
        "notes": "",
        "target_muscles": {M.FRONT_DELTS: F.ONE, M.SIDE_DELTS: F.POINT_FIVE, M.TRICEP: F.POINT_FIVE},
        "preferred_rep_ranges": {R.THREE_TO_SIX, R.FIVE_TO_TEN},
    },
    {
        "name": "Lateral Raise",
        "notes": "Lead with the elbows.",
        "target_muscles": {M.SIDE_DELTS: F.ONE},
        "preferred_rep_ranges": {R.TEN_TO_TWENTY, R.TWENTY_TO_THIRTY},
    },
    {
        "name": "Face Pull",
        "notes": "",
        "target_muscles": {M.REAR_DELTS: F.ONE, M.TRAPS: F.POINT_FIVE},
        "preferred_rep_ranges": {R.TEN_TO_TWENTY},
    },
    {
        "name": "Barbell Shrug",
        "notes": "",
        "target_muscles": {M.TRAPS: F.ONE, M.FOREARMS: F.POINT_FIVE},
        "preferred_rep_ranges": {R.TEN_TO_FIFTEEN},
    },
    {
        "name": "Standing Calf Raise",
        "notes": "Pause at the stretch.",
        "target_muscles": {M.CALVES: F.ONE},
        "preferred_rep_ranges": {R.TEN_TO_TWENTY, R.TWENTY_TO_THIRTY},
    },
    {
        "name": "Hanging Leg Raise",
        "notes": "",
        "target_muscles": {M.ABS: F.ONE},
        "preferred_rep_ranges": {R.TEN_TO_FIFTEEN},
    },
]


def run_all(service: ExerciseService, *, verbose: bool = False) -> dict[str, dict[str, int]]:
    """Create every fixture whose name is not already in the active catalog.

    :param service: Catalog service bound to the configured store.
    :param verbose: Log each fixture decision at DEBUG when ``True``.
    :returns: ``{"exercises": {"created": n, "existing": m}}``.
    """
    existing_names = {dto.name for dto in service.get_all()}
    created = existing = 0
    for fixture in EXERCISE_FIXTURES:
        if fixture["name"] in existing_names:
            existing += 1
            if verbose:
                LOGGER.debug("seed.exercise.exists name=%s", fixture["name"])
            continue
        dto = service.create_exercise(ExerciseDto.build(**fixture))
        created += 1
        if verbose:
            LOGGER.debug("seed.exercise.created", extra={"exercise_id": dto.id})
    LOGGER.info("seed.exercises created=%s existing=%s", created, existing)
    return {"exercises": {"created": created, "existing": existing}}
