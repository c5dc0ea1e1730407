"""Application factory wiring Flask extensions, services and blueprints."""

from __future__ import annotations

import logging

from flask import Flask

from exercise_library.core.config import STORE_MEMORY, STORE_SQLALCHEMY, BaseConfig, get_config
from exercise_library.core.logger import configure_logging, init_app as init_logging
from exercise_library.services._shared.ports.exercise_store import InMemoryExerciseStore
from exercise_library.services.exercises.service import ExerciseService
from exercise_library.uow import (
    InMemoryUnitOfWork,
    SQLAlchemyReadOnlyUnitOfWork,
    SQLAlchemyUnitOfWork,
)

log = logging.getLogger(__name__)


def build_exercise_service(store_kind: str) -> ExerciseService:
    """Construct the catalog service for the configured storage backend.

    :param store_kind: ``"sqlalchemy"`` or ``"memory"``.
    :raises ValueError: For any other backend name.
    """
    if store_kind == STORE_SQLALCHEMY:
        return ExerciseService(
            uow_factory=SQLAlchemyUnitOfWork,
            read_uow_factory=SQLAlchemyReadOnlyUnitOfWork,
        )
    if store_kind == STORE_MEMORY:
        store = InMemoryExerciseStore()
        return ExerciseService(uow_factory=lambda: InMemoryUnitOfWork(store))
    raise ValueError(f"Unsupported EXERCISE_STORE: {store_kind!r}")


def create_app(
    config: str | type[BaseConfig] | object | None = None,
    *,
    instance_relative_config: bool = True,
    instance_config_filename: str = "config.py",
) -> Flask:
    """Build and configure the Flask application.

    :param config: Config object/class, an import path string, or ``None`` to
        pick one from ``APP_ENV``.
    """

    app = Flask(__name__, instance_relative_config=instance_relative_config)

    app.config.from_object(get_config() if config is None else config)
    if instance_relative_config and instance_config_filename:
        app.config.from_pyfile(instance_config_filename, silent=True)

    configure_logging(app.config.get("LOG_LEVEL", "INFO"))

    from exercise_library.core import extensions

    extensions.init_app(app)

    init_logging(app)

    from exercise_library.core import cors

    cors.init_app(app)

    from exercise_library.api.deps import EXERCISE_SERVICE_KEY

    store_kind = str(app.config.get("EXERCISE_STORE", STORE_SQLALCHEMY)).strip().lower()
    app.extensions[EXERCISE_SERVICE_KEY] = build_exercise_service(store_kind)
    log.info("exercise store configured: %s", store_kind)

    from exercise_library.api import init_app as init_api

    init_api(app)

    from exercise_library.core import errors

    errors.init_app(app)

    from exercise_library import cli as app_cli

    app_cli.init_app(app)

    return app
