from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from typing import Any

from app.schemas.contact import ContactMessageCreate, ContactMessageRead
from app.schemas.content import PortfolioContentRead
from app.schemas.experience import ExperienceCreate, ExperienceRead, ExperienceUpdate
from app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from app.schemas.skills import SkillCreate, SkillRead, SkillUpdate
from app.schemas.user import UserCreate, UserRecord


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


def as_utc(dt: datetime | None) -> datetime | None:
    # sqlite hands back naive datetimes; everything stored is UTC.
    if dt is None or dt.tzinfo is not None:
        return dt
    return dt.replace(tzinfo=timezone.utc)


def next_timestamp(previous: datetime | None) -> datetime:
    """Current UTC time, never earlier than ``previous``."""
    now = utc_now()
    previous = as_utc(previous)
    if previous is not None and previous > now:
        return previous
    return now


class PortfolioStore(ABC):
    """Persistence for every portfolio entity.

    Lookups on unknown ids/sections return ``None`` (or ``False`` for
    deletes); the HTTP layer maps that to 404. Writes are last-write-wins:
    there is no version check and concurrent edits silently overwrite each
    other.
    """

    # Portfolio content
    @abstractmethod
    def get_content(self, section: str) -> PortfolioContentRead | None: ...

    @abstractmethod
    def list_content(self) -> list[PortfolioContentRead]: ...

    @abstractmethod
    def upsert_content(self, section: str, document: dict[str, Any]) -> PortfolioContentRead:
        """Replace the whole document of ``section`` and stamp ``last_updated``."""

    # Skills
    @abstractmethod
    def list_skills(self, category: str | None = None, *, visible_only: bool = False) -> list[SkillRead]: ...

    @abstractmethod
    def get_skill(self, skill_id: int) -> SkillRead | None: ...

    @abstractmethod
    def create_skill(self, skill: SkillCreate) -> SkillRead: ...

    @abstractmethod
    def update_skill(self, skill_id: int, update: SkillUpdate) -> SkillRead | None: ...

    @abstractmethod
    def delete_skill(self, skill_id: int) -> bool: ...

    # Experiences
    @abstractmethod
    def list_experiences(self, *, visible_only: bool = False) -> list[ExperienceRead]:
        """Sorted by ascending ``order``, ties by id."""

    @abstractmethod
    def create_experience(self, experience: ExperienceCreate) -> ExperienceRead: ...

    @abstractmethod
    def update_experience(self, experience_id: int, update: ExperienceUpdate) -> ExperienceRead | None: ...

    @abstractmethod
    def delete_experience(self, experience_id: int) -> bool: ...

    # Projects
    @abstractmethod
    def list_projects(self, *, visible_only: bool = False) -> list[ProjectRead]: ...

    @abstractmethod
    def list_featured_projects(self) -> list[ProjectRead]:
        """Projects that are both featured and visible."""

    @abstractmethod
    def create_project(self, project: ProjectCreate) -> ProjectRead: ...

    @abstractmethod
    def update_project(self, project_id: int, update: ProjectUpdate) -> ProjectRead | None: ...

    @abstractmethod
    def delete_project(self, project_id: int) -> bool: ...

    # Contact messages
    @abstractmethod
    def list_messages(self) -> list[ContactMessageRead]:
        """Newest first."""

    @abstractmethod
    def create_message(self, message: ContactMessageCreate) -> ContactMessageRead: ...

    @abstractmethod
    def mark_message_read(self, message_id: int) -> bool: ...

    @abstractmethod
    def delete_message(self, message_id: int) -> bool: ...

    # Users
    @abstractmethod
    def get_user_by_username(self, username: str) -> UserRecord | None: ...

    @abstractmethod
    def create_user(self, user: UserCreate) -> UserRecord: ...
