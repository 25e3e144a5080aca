"""High-level data access helpers backed by SQLAlchemy."""
from __future__ import annotations

from typing import Generic, Optional, Type, TypeVar

from sqlalchemy import delete, func, select
from sqlalchemy.exc import IntegrityError

from roster.core.errors import StorageConstraintError
from roster.db.models import Player, User
from roster.db.session import get_session

T = TypeVar("T", Player, User)


class SQLRepository(Generic[T]):
    """CRUD helpers for one mapped table, wrapping the SQLAlchemy session.

    Instances handed back are detached from their session with every
    column loaded, so callers can read and mutate them freely and pass
    them back to :meth:`save`.
    """

    model: Type[T]

    def __init__(self, model: Type[T] | None = None) -> None:
        if model is not None:
            self.model = model
        if getattr(self, "model", None) is None:
            raise TypeError(f"{type(self).__name__} needs a mapped model")

    def find_all(self) -> list[T]:
        with get_session() as session:
            stmt = select(self.model).order_by(self.model.id)
            return list(session.execute(stmt).scalars().all())

    def find_by_id(self, entity_id: int) -> Optional[T]:
        with get_session() as session:
            return session.get(self.model, entity_id)

    def save(self, entity: T) -> T:
        """Insert when ``entity.id`` is unset, otherwise upsert keyed on id."""
        with get_session() as session:
            if entity.id is None:
                session.add(entity)
            else:
                entity = session.merge(entity)
            try:
                session.commit()
            except IntegrityError as exc:
                session.rollback()
                raise StorageConstraintError(str(exc.orig)) from exc
            session.refresh(entity)
            return entity

    def delete_by_id(self, entity_id: int) -> None:
        with get_session() as session:
            session.execute(delete(self.model).where(self.model.id == entity_id))
            session.commit()

    def count(self) -> int:
        with get_session() as session:
            stmt = select(func.count()).select_from(self.model)
            return int(session.execute(stmt).scalar_one())

    def find_page(self, offset: int, limit: int) -> list[T]:
        """Rows ordered by id ascending; ``offset`` is zero-based."""
        if offset < 0 or limit < 0:
            raise ValueError("offset and limit must be non-negative")
        with get_session() as session:
            stmt = select(self.model).order_by(self.model.id).offset(offset).limit(limit)
            return list(session.execute(stmt).scalars().all())


class PlayerRepository(SQLRepository[Player]):
    model = Player


class UserRepository(SQLRepository[User]):
    model = User
