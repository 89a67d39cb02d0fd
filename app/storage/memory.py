from __future__ import annotations

import threading
from itertools import count
from typing import Any, TypeVar

from pydantic import BaseModel

from app.schemas.base import PartialUpdate
from app.schemas.contact import ContactMessageCreate, ContactMessageRead
from app.schemas.content import PortfolioContentRead
from app.schemas.experience import ExperienceCreate, ExperienceRead, ExperienceUpdate
from app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from app.schemas.skills import SkillCreate, SkillRead, SkillUpdate
from app.schemas.user import UserCreate, UserRecord
from app.storage.base import PortfolioStore, next_timestamp, utc_now


_M = TypeVar("_M", bound=BaseModel)


class _Table:
    """Id-keyed rows of one entity with its own id sequence."""

    def __init__(self) -> None:
        self.rows: dict[int, Any] = {}
        self._ids = count(1)

    def next_id(self) -> int:
        return next(self._ids)


class MemoryStore(PortfolioStore):
    """Process-local store for non-persistent deployments and tests.

    Every public method holds one lock for its whole read/replace, so each
    operation is atomic. Rows are copied on the way in and out; callers never
    share state with the store.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._content: dict[str, PortfolioContentRead] = {}
        self._content_ids = count(1)
        self._skills = _Table()
        self._experiences = _Table()
        self._projects = _Table()
        self._messages = _Table()
        self._users = _Table()

    @staticmethod
    def _copy(row: _M) -> _M:
        return row.model_copy(deep=True)

    def _insert(self, table: _Table, read_type: type[_M], data: dict[str, Any]) -> _M:
        with self._lock:
            row = read_type(id=table.next_id(), **data)
            table.rows[row.id] = row
            return self._copy(row)

    def _update(self, table: _Table, row_id: int, update: PartialUpdate) -> Any:
        with self._lock:
            row = table.rows.get(row_id)
            if row is None:
                return None
            # Rebuild so the stored row is a fresh instance, never the caller's.
            merged = type(row).model_validate({**row.model_dump(), **update.changes()})
            table.rows[row_id] = merged
            return self._copy(merged)

    def _delete(self, table: _Table, row_id: int) -> bool:
        with self._lock:
            return table.rows.pop(row_id, None) is not None

    def _rows(self, table: _Table) -> list[Any]:
        with self._lock:
            return [self._copy(row) for row in sorted(table.rows.values(), key=lambda r: r.id)]

    # Portfolio content
    def get_content(self, section: str) -> PortfolioContentRead | None:
        with self._lock:
            row = self._content.get(section)
            return self._copy(row) if row else None

    def list_content(self) -> list[PortfolioContentRead]:
        with self._lock:
            return [self._copy(row) for row in sorted(self._content.values(), key=lambda r: r.id)]

    def upsert_content(self, section: str, document: dict[str, Any]) -> PortfolioContentRead:
        with self._lock:
            existing = self._content.get(section)
            row = PortfolioContentRead(
                id=existing.id if existing else next(self._content_ids),
                section=section,
                content=dict(document),
                last_updated=next_timestamp(existing.last_updated if existing else None),
            )
            row = self._copy(row)
            self._content[section] = row
            return self._copy(row)

    # Skills
    def list_skills(self, category: str | None = None, *, visible_only: bool = False) -> list[SkillRead]:
        rows = self._rows(self._skills)
        if category is not None:
            rows = [row for row in rows if row.category == category]
        if visible_only:
            rows = [row for row in rows if row.is_visible]
        return rows

    def get_skill(self, skill_id: int) -> SkillRead | None:
        with self._lock:
            row = self._skills.rows.get(skill_id)
            return self._copy(row) if row else None

    def create_skill(self, skill: SkillCreate) -> SkillRead:
        return self._insert(self._skills, SkillRead, skill.model_dump())

    def update_skill(self, skill_id: int, update: SkillUpdate) -> SkillRead | None:
        return self._update(self._skills, skill_id, update)

    def delete_skill(self, skill_id: int) -> bool:
        return self._delete(self._skills, skill_id)

    # Experiences
    def list_experiences(self, *, visible_only: bool = False) -> list[ExperienceRead]:
        rows = self._rows(self._experiences)
        if visible_only:
            rows = [row for row in rows if row.is_visible]
        return sorted(rows, key=lambda row: (row.order, row.id))

    def create_experience(self, experience: ExperienceCreate) -> ExperienceRead:
        return self._insert(self._experiences, ExperienceRead, experience.model_dump())

    def update_experience(self, experience_id: int, update: ExperienceUpdate) -> ExperienceRead | None:
        return self._update(self._experiences, experience_id, update)

    def delete_experience(self, experience_id: int) -> bool:
        return self._delete(self._experiences, experience_id)

    # Projects
    def list_projects(self, *, visible_only: bool = False) -> list[ProjectRead]:
        rows = self._rows(self._projects)
        if visible_only:
            rows = [row for row in rows if row.is_visible]
        return rows

    def list_featured_projects(self) -> list[ProjectRead]:
        return [row for row in self._rows(self._projects) if row.is_featured and row.is_visible]

    def create_project(self, project: ProjectCreate) -> ProjectRead:
        return self._insert(self._projects, ProjectRead, project.model_dump())

    def update_project(self, project_id: int, update: ProjectUpdate) -> ProjectRead | None:
        return self._update(self._projects, project_id, update)

    def delete_project(self, project_id: int) -> bool:
        return self._delete(self._projects, project_id)

    # Contact messages
    def list_messages(self) -> list[ContactMessageRead]:
        rows = self._rows(self._messages)
        return sorted(rows, key=lambda row: (row.created_at, row.id), reverse=True)

    def create_message(self, message: ContactMessageCreate) -> ContactMessageRead:
        return self._insert(
            self._messages,
            ContactMessageRead,
            {**message.model_dump(), "created_at": utc_now(), "is_read": False},
        )

    def mark_message_read(self, message_id: int) -> bool:
        with self._lock:
            row = self._messages.rows.get(message_id)
            if row is None:
                return False
            self._messages.rows[message_id] = row.model_copy(update={"is_read": True})
            return True

    def delete_message(self, message_id: int) -> bool:
        return self._delete(self._messages, message_id)

    # Users
    def get_user_by_username(self, username: str) -> UserRecord | None:
        with self._lock:
            for row in self._users.rows.values():
                if row.username == username:
                    return self._copy(row)
            return None

    def create_user(self, user: UserCreate) -> UserRecord:
        return self._insert(self._users, UserRecord, user.model_dump())
