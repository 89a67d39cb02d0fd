from __future__ import annotations

from fastapi.testclient import TestClient

from app.config import settings
from app.data.defaults import DEFAULT_EXPERIENCES, DEFAULT_PROJECTS, DEFAULT_SECTIONS, DEFAULT_SKILLS
from app.services.seed_service import seed_store
from app.storage import MemoryStore, SqlStore
from app.utils.password_hash import verify_password


def test_seed_populates_empty_store_once(db_session) -> None:
    store = SqlStore(db_session)
    report = seed_store(store)
    assert report.admin_created is True
    assert report.sections_created == list(DEFAULT_SECTIONS)
    assert report.skills_created == len(DEFAULT_SKILLS)
    assert report.experiences_created == len(DEFAULT_EXPERIENCES)
    assert report.projects_created == len(DEFAULT_PROJECTS)

    admin = store.get_user_by_username(settings.admin_username)
    assert admin is not None and admin.is_admin
    assert admin.password != settings.admin_password
    assert verify_password(settings.admin_password, admin.password)

    again = seed_store(store)
    assert again.admin_created is False
    assert again.sections_created == []
    assert again.skills_created == 0
    assert len(store.list_skills()) == len(DEFAULT_SKILLS)


def test_seed_fills_only_missing_groups() -> None:
    store = MemoryStore()
    store.upsert_content("hero", {"title": "Custom"})
    report = seed_store(store)
    assert report.sections_created == ["about", "contact"]
    assert store.get_content("hero").content == {"title": "Custom"}


def test_memory_backend_serves_seeded_content(monkeypatch) -> None:
    from app.main import create_app

    monkeypatch.setattr(settings, "storage_backend", "memory")
    app = create_app()
    with TestClient(app) as client:
        hero = client.get("/api/content/hero")
        assert hero.status_code == 200
        assert hero.json()["content"] == DEFAULT_SECTIONS["hero"]
        assert len(client.get("/api/skills").json()) == len(DEFAULT_SKILLS)
        assert [e["order"] for e in client.get("/api/experiences").json()] == [1, 2, 3]

        token = client.post("/api/auth/login", json={"username": "admin", "password": "admin123"}).json()
        headers = {"Authorization": f"Bearer {token['accessToken']}"}
        r = client.post(
            "/api/admin/skills",
            json={"name": "Rust", "category": "Programming", "proficiency": 30},
            headers=headers,
        )
        assert r.status_code == 201
        assert len(client.get("/api/skills/Programming").json()) == 5


def test_memory_client_fixture_isolates_store(memory_client, admin_headers) -> None:
    r = memory_client.post(
        "/api/contact",
        json={"name": "Jo", "email": "a@b.com", "subject": "Hello there", "message": "This is a long enough message."},
    )
    assert r.status_code == 201
    assert len(memory_client.store.list_messages()) == 1
    listed = memory_client.get("/api/admin/contact-messages", headers=admin_headers).json()
    assert listed[0]["isRead"] is False
