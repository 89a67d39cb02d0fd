from __future__ import annotations

from collections.abc import Iterator
from datetime import timedelta

import pytest

from app.schemas.contact import ContactMessageCreate
from app.schemas.experience import ExperienceCreate, ExperienceUpdate
from app.schemas.project import ProjectCreate
from app.schemas.skills import SkillCreate, SkillUpdate
from app.storage import MemoryStore, PortfolioStore, SqlStore
from app.storage.base import as_utc, next_timestamp, utc_now


@pytest.fixture(params=["memory", "sql"])
def store(request) -> Iterator[PortfolioStore]:
    if request.param == "memory":
        yield MemoryStore()
    else:
        yield SqlStore(request.getfixturevalue("db_session"))


def test_upsert_then_get_returns_same_document_and_newer_stamp(store: PortfolioStore) -> None:
    doc = {"title": "About", "paragraphs": ["one", "two"], "certifications": [{"name": "CKA", "issuer": "CNCF"}]}
    first = store.upsert_content("about", doc)
    got = store.get_content("about")
    assert got is not None
    assert got.content == doc
    assert got.id == first.id

    newer = {"title": "About v2", "paragraphs": []}
    second = store.upsert_content("about", newer)
    assert second.id == first.id
    assert second.last_updated >= first.last_updated
    assert store.get_content("about").content == newer
    assert [c.section for c in store.list_content()] == ["about"]


def test_returned_documents_are_not_shared_with_the_store(store: PortfolioStore) -> None:
    doc = {"title": "Hero", "tags": ["a"]}
    store.upsert_content("hero", doc)
    doc["tags"].append("mutated")
    got = store.get_content("hero")
    got.content["title"] = "changed"
    assert store.get_content("hero").content == {"title": "Hero", "tags": ["a"]}


def test_unknown_lookups(store: PortfolioStore) -> None:
    assert store.get_content("missing") is None
    assert store.get_skill(1) is None
    assert store.update_skill(1, SkillUpdate(proficiency=5)) is None
    assert store.delete_skill(1) is False
    assert store.update_experience(1, ExperienceUpdate(order=1)) is None
    assert store.delete_project(1) is False
    assert store.mark_message_read(1) is False
    assert store.delete_message(1) is False
    assert store.get_user_by_username("nobody") is None


def test_delete_missing_skill_leaves_list_unchanged(store: PortfolioStore) -> None:
    a = store.create_skill(SkillCreate(name="Go", category="Programming", proficiency=70))
    b = store.create_skill(SkillCreate(name="Bash", category="Programming", proficiency=85))
    assert store.delete_skill(b.id + 100) is False
    assert store.list_skills() == [a, b]


def test_skill_partial_update_and_filters(store: PortfolioStore) -> None:
    go = store.create_skill(SkillCreate(name="Go", category="Programming", proficiency=70))
    store.create_skill(SkillCreate(name="AWS", category="Cloud", proficiency=90, is_visible=False))

    updated = store.update_skill(go.id, SkillUpdate(proficiency=75))
    assert updated.proficiency == 75
    assert updated.name == "Go"
    assert [s.name for s in store.list_skills("Cloud")] == ["AWS"]
    assert store.list_skills("Cloud", visible_only=True) == []


def test_experiences_sorted_by_order(store: PortfolioStore) -> None:
    for position, order, visible in (("c", 3, True), ("a", 1, True), ("hidden", 2, False), ("b", 1, True)):
        store.create_experience(
            ExperienceCreate(
                position=position,
                company="Acme",
                description="d",
                start_date="2020",
                order=order,
                is_visible=visible,
            )
        )
    assert [e.position for e in store.list_experiences()] == ["a", "b", "hidden", "c"]
    assert [e.position for e in store.list_experiences(visible_only=True)] == ["a", "b", "c"]


def test_featured_projects_must_also_be_visible(store: PortfolioStore) -> None:
    store.create_project(ProjectCreate(title="Shown", description="d", is_featured=True))
    store.create_project(ProjectCreate(title="Hidden", description="d", is_featured=True, is_visible=False))
    store.create_project(ProjectCreate(title="Plain", description="d"))
    assert [p.title for p in store.list_featured_projects()] == ["Shown"]
    assert [p.title for p in store.list_projects(visible_only=True)] == ["Shown", "Plain"]


def test_messages_are_created_unread_and_listed_newest_first(store: PortfolioStore) -> None:
    first = store.create_message(
        ContactMessageCreate(name="Jo", email="a@b.com", subject="Hello there", message="This is long enough.")
    )
    second = store.create_message(
        ContactMessageCreate(name="Al", email="c@d.org", subject="Hi again", message="Another long message.")
    )
    assert first.is_read is False
    assert first.created_at.tzinfo is not None
    assert [m.id for m in store.list_messages()] == [second.id, first.id]

    assert store.mark_message_read(first.id) is True
    assert {m.id: m.is_read for m in store.list_messages()} == {first.id: True, second.id: False}


def test_next_timestamp_never_goes_backwards() -> None:
    future = utc_now() + timedelta(hours=1)
    assert next_timestamp(future) == future
    assert next_timestamp(future.replace(tzinfo=None)) == future
    assert next_timestamp(None) <= utc_now()
    assert as_utc(None) is None


def test_losing_the_race_to_create_a_section_overwrites_it(db_session) -> None:
    from app.database import SessionLocal

    class LateStore(SqlStore):
        # Misses the row on its first lookup, as if another writer inserted it meanwhile.
        missed = False

        def _content_row(self, section):
            if not self.missed:
                self.missed = True
                return None
            return super()._content_row(section)

    with SessionLocal() as other:
        first = SqlStore(other).upsert_content("hero", {"title": "First"})

    second = LateStore(db_session).upsert_content("hero", {"title": "Second"})
    assert second.id == first.id
    assert second.last_updated >= first.last_updated
    assert [c.content for c in SqlStore(db_session).list_content()] == [{"title": "Second"}]
