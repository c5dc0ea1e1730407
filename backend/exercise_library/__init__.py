"""Exercise library service.

Exposes :func:`exercise_library.factory.create_app` at package level so
WSGI servers can target ``exercise_library:create_app()``.
"""

from __future__ import annotations

from .factory import create_app

__all__ = ["create_app"]
