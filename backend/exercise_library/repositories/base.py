"""Generic repository base for SQLAlchemy 2.x.

Repositories stay thin and persistence-focused:

* they never implement use cases or domain policies;
* they never call commit/rollback, the Unit of Work owns the transaction;
* eager-loading is opt-in via ``_default_eagerload`` to avoid N+1 queries.
"""

from __future__ import annotations

from typing import Any, Generic, TypeVar, cast

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from exercise_library.core.extensions import db

E = TypeVar("E")  # SQLAlchemy mapped entity type


class BaseRepository(Generic[E]):
    """Persistence-only repository for a single mapped table.

    Subclasses MUST define ``model``; they MAY override
    ``_default_eagerload`` to attach loader options.
    """

    #: SQLAlchemy mapped model (must be set by subclasses)
    model: type[E]

    def __init__(self, session: Session | None = None) -> None:
        """Bind the repository to an optional explicit session.

        :param session: Session shared across the Unit of Work scope. When
            ``None`` the Flask-scoped session is used.
        :type session: :class:`sqlalchemy.orm.Session` | None
        """
        self._session: Session | None = session

    @property
    def session(self) -> Session:
        """Return the injected session or the Flask-scoped one."""
        if self._session is not None:
            return self._session
        return cast(Session, db.session)

    def _default_eagerload(self, stmt: Select[Any]) -> Select[Any]:
        return stmt

    def _select(self) -> Select[Any]:
        return self._default_eagerload(select(self.model))

    def get(self, pk: Any, *, for_update: bool = False) -> E | None:
        """Fetch a row by primary key.

        :param pk: Primary key value.
        :param for_update: Emit ``SELECT ... FOR UPDATE`` on dialects that
            support row locks (ignored by SQLite).
        :returns: Mapped instance or ``None``.
        """
        if not for_update:
            return self.session.get(self.model, pk)
        stmt = self._select().where(self.model.id == pk).with_for_update()  # type: ignore[attr-defined]
        return cast("E | None", self.session.execute(stmt).scalars().first())

    def add(self, instance: E, *, flush: bool = True) -> E:
        """Stage a new row, flushing by default so its PK is assigned."""
        self.session.add(instance)
        if flush:
            self.session.flush()
        return instance

    def flush(self) -> None:
        self.session.flush()
