"""
Shared fixtures: a temporary SQLite database per test and an HTTP client.
"""
from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Make the forum_api package importable when the tests run from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from forum_api.core import config as core_config  # noqa: E402
from forum_api.db import create_tables  # noqa: E402
from forum_api.db import models  # noqa: E402
from forum_api.db import session as db_session  # noqa: E402


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and build the schema; full teardown afterwards."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _reset_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    create_tables.create_all()

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _reset_caches()


@pytest.fixture()
def client(temp_db):
    from forum_api.app import app

    return TestClient(app)


@pytest.fixture()
def hierarchy(temp_db):
    """Subpage 'Toyota' > category 'Sports Cars' > subcategory 'Supra'."""
    from forum_api.repositories.sql_repository import SQLRepository

    repo = SQLRepository()
    page = repo.create_subpage("Toyota")
    category = repo.create_category("Sports Cars", page.page_id)
    subcategory = repo.create_subcategory("Supra", category.cat_id)
    return {"page": page, "category": category, "subcategory": subcategory, "repo": repo}
