"""Engine/session helpers for the SQL backend."""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import declarative_base, sessionmaker, Session

from roster.core.config import get_settings

Base = declarative_base()


@lru_cache
def get_engine():
    settings = get_settings()
    raw = (settings.database_url or "").strip()
    if not raw:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    url = make_url(raw)
    if settings.database_username:
        url = url.set(username=settings.database_username)
    if settings.database_password:
        url = url.set(password=settings.database_password)
    return create_engine(url, future=True, pool_pre_ping=True)


@lru_cache
def _get_sessionmaker():
    return sessionmaker(bind=get_engine(), autoflush=False, autocommit=False, future=True)


@contextmanager
def get_session() -> Session:
    session: Session = _get_sessionmaker()()
    try:
        yield session
    finally:
        session.close()
