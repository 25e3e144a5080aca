from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the roster package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from roster.core import config as core_config  # noqa: E402
from roster.db import models  # noqa: E402
from roster.db import session as db_session  # noqa: E402


def _clear_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a throwaway SQLite file and build the schema."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.delenv("DATABASE_USERNAME", raising=False)
    monkeypatch.delenv("DATABASE_PASSWORD", raising=False)
    _clear_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _clear_caches()


@pytest.fixture()
def client(temp_db):
    from fastapi.testclient import TestClient

    from roster.app import app

    # Unhandled errors are still rendered by the catch-all handler; Starlette
    # re-raises them afterwards, which TestClient would otherwise propagate.
    with_client = TestClient(app, raise_server_exceptions=False)
    yield with_client
    with_client.close()
