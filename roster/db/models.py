"""SQLAlchemy models for the two record kinds."""
from __future__ import annotations

from sqlalchemy import BigInteger, Column, Integer, String

from .session import Base

# SQLite only autoincrements INTEGER PRIMARY KEY columns.
IdType = BigInteger().with_variant(Integer(), "sqlite")


class Player(Base):
    __tablename__ = "player"

    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    surname = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"Player(id={self.id!r}, name={self.name!r}, surname={self.surname!r}, email={self.email!r})"


class User(Base):
    __tablename__ = "user"

    id = Column(IdType, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    surname = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True)

    def __repr__(self) -> str:
        return f"User(id={self.id!r}, name={self.name!r}, surname={self.surname!r}, email={self.email!r})"
