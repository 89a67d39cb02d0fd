from __future__ import annotations

import os
import tempfile
from typing import Any

import pytest
from fastapi.testclient import TestClient


ADMIN_TOKEN = "admin123"


def pytest_configure() -> None:
    # Ensure the SQLAlchemy engine is created against sqlite for tests.
    os.environ["ORM_DB_URL"] = "sqlite:///./test.db"
    os.environ["ENVIRONMENT"] = "test"
    os.environ["STORAGE_BACKEND"] = "sql"

    # Fixed admin credentials; local .env must not leak into tests.
    os.environ["ADMIN_USERNAME"] = "admin"
    os.environ["ADMIN_PASSWORD"] = "admin123"
    os.environ["ADMIN_TOKEN"] = ADMIN_TOKEN
    os.environ["ACCEPT_SHARED_SECRET"] = "true"
    os.environ["JWT_SECRET"] = "test-secret"

    # Never call GitHub from unit tests.
    os.environ["GITHUB_TOKEN"] = ""
    os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="portfolio-uploads-")


def reset_database() -> None:
    from app.database import Base, engine
    import app.models  # noqa: F401

    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


@pytest.fixture()
def client() -> Any:
    from app.main import create_app

    reset_database()
    app = create_app()
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def memory_client() -> Any:
    """Same app, but every request goes through one fresh, empty MemoryStore."""
    from app.main import create_app
    from app.routers.dependencies import get_store
    from app.storage import MemoryStore

    store = MemoryStore()
    app = create_app()
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as c:
        c.store = store
        yield c


@pytest.fixture()
def admin_headers() -> dict[str, str]:
    return {"Authorization": f"Bearer {ADMIN_TOKEN}"}


@pytest.fixture()
def db_session() -> Any:
    from app.database import SessionLocal

    reset_database()
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
