"""Unit of Work abstractions and concrete implementations.

Services depend on :class:`UnitOfWork` only; the application factory decides
which implementation backs them.
"""

from .base import UnitOfWork, UnitOfWorkFactory
from .memory_uow import InMemoryUnitOfWork
from .sqlalchemy_uow import SQLAlchemyReadOnlyUnitOfWork, SQLAlchemyUnitOfWork

__all__ = [
    "InMemoryUnitOfWork",
    "UnitOfWork",
    "UnitOfWorkFactory",
    "SQLAlchemyUnitOfWork",
    "SQLAlchemyReadOnlyUnitOfWork",
]
