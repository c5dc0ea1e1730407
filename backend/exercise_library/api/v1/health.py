"""Health check endpoint."""

from __future__ import annotations

from flask import Blueprint, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from exercise_library.api.deps import json_response, timing
from exercise_library.core.config import STORE_MEMORY
from exercise_library.core.extensions import db

bp = Blueprint("health", __name__)


@bp.get("/health")
@timing
def healthcheck():
    """Return application and storage health information."""

    if current_app.config.get("EXERCISE_STORE") == STORE_MEMORY:
        db_status = "memory"
    else:
        db_status = "ok"
        try:
            db.session.execute(text("SELECT 1"))
        except SQLAlchemyError:
            current_app.logger.exception("healthcheck.db_error")
            db_status = "fail"
        finally:
            db.session.rollback()
    version = current_app.config.get("APP_VERSION", "dev")
    return json_response({"status": "ok", "db": db_status, "version": version})
