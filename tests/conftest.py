from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Keep the portfolio package importable when running the tests from a checkout
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from portfolio.app import create_app  # noqa: E402
from portfolio.core import config as core_config  # noqa: E402
from portfolio.db import models  # noqa: E402
from portfolio.db import session as db_session  # noqa: E402

ADMIN_TOKEN = "test-admin-token"


def _reset_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def settings_env(tmp_path, monkeypatch):
    """Point DATA_DIR/UPLOADS_DIR at a temp dir and reset cached settings."""
    monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
    monkeypatch.setenv("UPLOADS_DIR", str(tmp_path / "uploads"))
    monkeypatch.setenv("ADMIN_PASSWORD", "s3cret")
    monkeypatch.setenv("ADMIN_TOKEN", ADMIN_TOKEN)
    monkeypatch.setenv("SEED_DEFAULTS", "0")
    monkeypatch.delenv("DATABASE_URL", raising=False)
    monkeypatch.delenv("ADMIN_PASSWORD_HASH", raising=False)
    monkeypatch.delenv("CONTACT_NOTIFY_EMAIL", raising=False)
    _reset_caches()
    yield tmp_path
    _reset_caches()


@pytest.fixture()
def sql_env(settings_env, monkeypatch):
    """Configure a temporary SQLite database with fresh tables."""
    db_file = settings_env / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    _reset_caches()

    engine = db_session.get_engine()
    models.Base.metadata.drop_all(bind=engine)
    models.Base.metadata.create_all(bind=engine)

    yield db_file

    models.Base.metadata.drop_all(bind=engine)
    engine.dispose()
    _reset_caches()


@pytest.fixture()
def app(settings_env):
    return create_app()


@pytest.fixture()
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture()
def admin_headers():
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}
