"""Unit tests for the exercise request/response schema."""

from __future__ import annotations

import pytest
from exercise_library.domain import MuscleGroup, RepRange, TargetMuscleFactor
from exercise_library.schemas import exercise_list_schema, exercise_schema, load_exercise
from exercise_library.services.exercises import ExerciseDto
from marshmallow import ValidationError
from tests.helpers.http import exercise_payload

M, F, R = MuscleGroup, TargetMuscleFactor, RepRange


class TestLoad:
    def test_loads_full_payload(self):
        dto = load_exercise(exercise_payload())

        assert dto == ExerciseDto.build(
            name="Back Squat",
            notes="Brace before descending.",
            target_muscles={M.QUADS: F.ONE, M.GLUTES: F.POINT_FIVE},
            preferred_rep_ranges={R.FIVE_TO_TEN, R.THREE_TO_SIX},
        )

    def test_factor_accepts_member_names(self):
        dto = load_exercise(exercise_payload(targetMuscles={"BACK": "POINT_FIVE", "BICEP": "ONE"}))
        assert dto.target_muscles == {M.BACK: F.POINT_FIVE, M.BICEP: F.ONE}

    def test_optional_fields_default_to_empty(self):
        dto = load_exercise({"name": "Plank"})
        assert dto == ExerciseDto(name="Plank")

    def test_ignores_id_and_unknown_keys(self):
        dto = load_exercise(exercise_payload(id=55, deleted=True, extra="x"))
        assert dto.id is None

    @pytest.mark.parametrize(
        "overrides, field",
        [
            ({"name": ""}, "name"),
            ({"name": None}, "name"),
            ({"name": 12}, "name"),
            ({"notes": 3}, "notes"),
            ({"targetMuscles": {"NECK": 1.0}}, "targetMuscles"),
            ({"targetMuscles": {"QUADS": 2.0}}, "targetMuscles"),
            ({"targetMuscles": {"QUADS": True}}, "targetMuscles"),
            ({"targetMuscles": ["QUADS"]}, "targetMuscles"),
            ({"preferredRepRanges": ["ONE_TO_TWO"]}, "preferredRepRanges"),
            ({"preferredRepRanges": "FIVE_TO_TEN"}, "preferredRepRanges"),
        ],
    )
    def test_rejects_malformed_fields(self, overrides, field):
        with pytest.raises(ValidationError) as excinfo:
            load_exercise(exercise_payload(**overrides))
        assert field in excinfo.value.messages

    def test_requires_name(self):
        payload = exercise_payload()
        del payload["name"]
        with pytest.raises(ValidationError) as excinfo:
            load_exercise(payload)
        assert "name" in excinfo.value.messages

    @pytest.mark.parametrize("body", [None, [], "text", 3])
    def test_rejects_non_object_bodies(self, body):
        with pytest.raises(ValidationError) as excinfo:
            load_exercise(body)
        assert "_schema" in excinfo.value.messages

    def test_duplicate_rep_ranges_collapse(self):
        dto = load_exercise(exercise_payload(preferredRepRanges=["ONE_TO_THREE", "ONE_TO_THREE"]))
        assert dto.preferred_rep_ranges == frozenset({R.ONE_TO_THREE})


class TestDump:
    def test_dumps_wire_shape(self):
        dto = ExerciseDto.build(
            id=3,
            name="Pull-Up",
            notes="",
            target_muscles={M.BACK: F.ONE, M.BICEP: F.POINT_FIVE},
            preferred_rep_ranges={R.TEN_TO_FIFTEEN, R.FIVE_TO_TEN},
        )

        assert exercise_schema.dump(dto) == {
            "id": 3,
            "name": "Pull-Up",
            "notes": "",
            "targetMuscles": {"BACK": 1.0, "BICEP": 0.5},
            "preferredRepRanges": ["FIVE_TO_TEN", "TEN_TO_FIFTEEN"],
        }

    def test_dumps_lists(self):
        items = exercise_list_schema.dump([ExerciseDto(name="A", id=1), ExerciseDto(name="B", id=2)])
        assert [item["name"] for item in items] == ["A", "B"]
        assert items[0]["targetMuscles"] == {}
        assert items[0]["preferredRepRanges"] == []
