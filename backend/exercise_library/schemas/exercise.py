"""Exercise resource schemas."""

from __future__ import annotations

from typing import Any

from marshmallow import EXCLUDE, Schema, ValidationError, fields, post_load, validate

from exercise_library.domain import MuscleGroup, RepRange, TargetMuscleFactor, sorted_rep_ranges
from exercise_library.services.exercises.dto import ExerciseDto


class TargetFactorField(fields.Field):
    """Emphasis factor: loads ``1.0``/``0.5`` or ``"ONE"``/``"POINT_FIVE"``, dumps the number."""

    default_error_messages = {
        "invalid": "Must be one of: 1.0, 0.5, ONE, POINT_FIVE.",
    }

    def _serialize(self, value: Any, attr: str | None, obj: Any, **kwargs: Any) -> float | None:
        if value is None:
            return None
        return TargetMuscleFactor.parse(value).factor

    def _deserialize(self, value: Any, attr: str | None, data: Any, **kwargs: Any) -> TargetMuscleFactor:
        try:
            return TargetMuscleFactor.parse(value)
        except ValueError as exc:
            raise self.make_error("invalid") from exc


class RepRangeSetField(fields.List):
    """Set of rep ranges by name; dumped in declaration order."""

    def __init__(self, **kwargs: Any) -> None:
        super().__init__(fields.Enum(RepRange), **kwargs)

    def _serialize(self, value: Any, attr: str | None, obj: Any, **kwargs: Any) -> list[Any] | None:
        if value is None:
            return None
        return super()._serialize(sorted_rep_ranges(value), attr, obj, **kwargs)

    def _deserialize(self, value: Any, attr: str | None, data: Any, **kwargs: Any) -> frozenset[RepRange]:
        return frozenset(super()._deserialize(value, attr, data, **kwargs))


class ExerciseSchema(Schema):
    """
    JSON shape of an exercise, used both to validate request bodies and to
    render responses.

    Unknown keys and any ``id`` in a request body are ignored.
    """

    class Meta:
        unknown = EXCLUDE

    name = fields.String(required=True, validate=validate.Length(min=1, max=255))
    notes = fields.String(load_default="")
    target_muscles = fields.Dict(
        keys=fields.Enum(MuscleGroup),
        values=TargetFactorField(),
        data_key="targetMuscles",
        load_default=dict,
    )
    preferred_rep_ranges = RepRangeSetField(data_key="preferredRepRanges", load_default=frozenset)
    id = fields.Integer(dump_only=True, allow_none=True)

    @post_load
    def make_dto(self, data: dict[str, Any], **_: Any) -> ExerciseDto:
        return ExerciseDto.build(**data)


def load_exercise(payload: Any) -> ExerciseDto:
    """Validate a decoded JSON body into an :class:`ExerciseDto`.

    :raises marshmallow.ValidationError: When the body is not an object or a
        field is missing or malformed.
    """
    if not isinstance(payload, dict):
        raise ValidationError({"_schema": ["Request body must be a JSON object."]})
    return exercise_schema.load(payload)


exercise_schema = ExerciseSchema()
exercise_list_schema = ExerciseSchema(many=True)
