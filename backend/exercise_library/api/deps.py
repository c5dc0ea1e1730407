"""Shared API helpers for request parsing and cross-cutting concerns."""

from __future__ import annotations

import functools
import time
from collections.abc import Callable
from typing import Any, TypeVar, cast

from flask import Response, current_app, jsonify, request

from exercise_library.services.exercises.service import ExerciseService

F = TypeVar("F", bound=Callable[..., Any])

EXERCISE_SERVICE_KEY = "exercise_service"


def get_exercise_service() -> ExerciseService:
    """Return the service instance built once by the application factory."""
    return cast(ExerciseService, current_app.extensions[EXERCISE_SERVICE_KEY])


def json_body() -> Any:
    """Return the decoded JSON body, or ``None`` when absent or malformed."""
    return request.get_json(silent=True)


def json_response(payload: Any, *, status: int = 200) -> Response:
    """Return a JSON response enforcing a consistent MIME type."""
    response = jsonify(payload)
    response.status_code = status
    return response


def no_content() -> Response:
    """Return an empty ``204 No Content`` response."""
    return Response(status=204)


def timing(func: F) -> F:
    """Decorator logging handler execution time in milliseconds."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any):
        start = time.perf_counter()
        try:
            return func(*args, **kwargs)
        finally:
            elapsed_ms = (time.perf_counter() - start) * 1000
            current_app.logger.debug(
                "request.elapsed",
                extra={"endpoint": request.endpoint, "elapsed_ms": round(elapsed_ms, 2)},
            )

    return wrapper  # type: ignore[return-value]
