"""
Shared test configuration.

Every test gets its own SQLite file under ``tmp_path``.  ``created_at``
comes from the column default and ``updated_at``/``deleted_at`` from the
service's UTC clock.  List ordering falls back to ``id DESC`` on equal
timestamps, so ordering assertions do not depend on clock resolution.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT_DIR = Path(__file__).resolve().parent.parent
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from devotional_api.app.core.config import Settings  # noqa: E402
from devotional_api.app.core.db import Database  # noqa: E402
from devotional_api.app.main import create_app  # noqa: E402
from devotional_api.app.services.devotional_service import DevotionalService  # noqa: E402


@pytest.fixture
def db_path(tmp_path: Path) -> str:
    return str(tmp_path / "devotionals.db")


@pytest.fixture
def settings(db_path: str) -> Settings:
    return Settings(
        project_name="Test Devotional API",
        log_level="WARNING",
        log_file="",
        database_url=db_path,
        db_busy_timeout=1.0,
    )


@pytest.fixture
def database(db_path: str) -> Database:
    db = Database(db_path, busy_timeout=1.0)
    db.init_schema()
    return db


@pytest.fixture
def service(database: Database) -> DevotionalService:
    return DevotionalService(database)


@pytest.fixture
def client(settings: Settings):
    app = create_app(settings)
    with TestClient(app) as test_client:
        yield test_client
