"""Pytest fixtures building an isolated application per test.

Every test gets a fresh Flask app bound to its own in-memory SQLite engine,
so committed data never leaks between cases.
"""

from __future__ import annotations

import pytest
from exercise_library.core.config import STORE_MEMORY, STORE_SQLALCHEMY, TestingConfig
from exercise_library.core.extensions import db as _db  # Flask-SQLAlchemy instance
from exercise_library.factory import create_app  # application factory under test


class TestConfig(TestingConfig):
    """Testing configuration for creating the Flask app.

    Notes
    -----
    - Uses an in-memory SQLite database for speed.
    - Allows any CORS origin so preflight tests need no fixture origin.
    """

    SQLALCHEMY_DATABASE_URI = "sqlite:///:memory:"
    EXERCISE_STORE = STORE_SQLALCHEMY
    CORS_ORIGINS = "*"
    APP_VERSION = "test"


class MemoryTestConfig(TestConfig):
    """Same as :class:`TestConfig` but backed by the in-memory store."""

    EXERCISE_STORE = STORE_MEMORY


@pytest.fixture()
def app():
    """Create a Flask application with the catalog tables in place.

    Yields
    ------
    flask.Flask
        Application with :class:`TestConfig` applied and an active app
        context.
    """
    application = create_app(TestConfig)
    application.logger.setLevel("WARNING")
    with application.app_context():
        _db.create_all()
        yield application
        _db.session.remove()
        _db.drop_all()


@pytest.fixture()
def db(app):
    """Return the database extension bound to the testing application."""
    return _db


@pytest.fixture()
def session(db):
    """Return the Flask-scoped session used by application code."""
    return db.session


@pytest.fixture()
def client(app):
    """Return a test client bound to the SQLAlchemy-backed application."""
    return app.test_client()


@pytest.fixture()
def memory_app():
    """Create an application whose catalog lives in process memory."""
    application = create_app(MemoryTestConfig)
    with application.app_context():
        yield application


@pytest.fixture()
def memory_client(memory_app):
    """Return a test client bound to the in-memory application."""
    return memory_app.test_client()


@pytest.fixture(scope="session")
def faker():
    """Provide a :class:`faker.Faker` instance seeded for deterministic tests."""
    from faker import Faker

    fk = Faker()
    Faker.seed(1337)
    return fk


# -- Hook up Factory Boy to the Flask-scoped session ---------------------------
@pytest.fixture(autouse=True)
def _factories_session(session):
    """Wire Factory Boy's session helper to the per-test session."""
    from tests.factories import SQLAlchemySession

    SQLAlchemySession.set(session)
    yield
    SQLAlchemySession.set(None)
