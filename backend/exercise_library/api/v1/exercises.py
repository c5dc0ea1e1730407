"""Exercise catalog endpoints.

Soft-deleted exercises are omitted from ``GET /exercises`` but stay readable
through ``GET /exercises/<id>``. ``PUT`` and ``DELETE`` answer ``204`` even
when the id is unknown. Ids outside the storable range, negative ones
included, are simply unknown ids.
"""

from __future__ import annotations

from flask import Blueprint

from exercise_library.api.deps import (
    get_exercise_service,
    json_body,
    json_response,
    no_content,
    timing,
)
from exercise_library.schemas import exercise_list_schema, exercise_schema, load_exercise
from exercise_library.services._shared.errors import ServiceError

bp = Blueprint("exercises", __name__, url_prefix="/exercises")


@bp.get("")
@timing
def list_exercises():
    """Return every exercise that has not been deleted."""

    service = get_exercise_service()
    return json_response(exercise_list_schema.dump(service.get_all()))


@bp.get("/<int(signed=True):exercise_id>")
@timing
def get_exercise(exercise_id: int):
    """Return one exercise, including soft-deleted ones."""

    service = get_exercise_service()
    try:
        dto = service.get_by_id(exercise_id)
    except ServiceError as exc:
        raise service.translate_exceptions(exc) from exc
    return json_response(exercise_schema.dump(dto))


@bp.post("")
@timing
def create_exercise():
    """Create an exercise; the response carries the assigned id."""

    dto = load_exercise(json_body())
    created = get_exercise_service().create_exercise(dto)
    return json_response(exercise_schema.dump(created), status=201)


@bp.put("/<int(signed=True):exercise_id>")
@timing
def update_exercise(exercise_id: int):
    """Fully replace an exercise's contents."""

    dto = load_exercise(json_body())
    get_exercise_service().update_exercise(exercise_id, dto)
    return no_content()


@bp.delete("/<int(signed=True):exercise_id>")
@timing
def delete_exercise(exercise_id: int):
    """Soft-delete an exercise."""

    get_exercise_service().delete_exercise(exercise_id)
    return no_content()
