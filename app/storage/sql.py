from __future__ import annotations

import copy
import logging
from typing import Any, TypeVar

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from app.database import Base
from app.models.contact_message import ContactMessage
from app.models.experience import Experience
from app.models.portfolio_content import PortfolioContent
from app.models.project import Project
from app.models.skills import Skill
from app.models.user import User
from app.schemas.contact import ContactMessageCreate, ContactMessageRead
from app.schemas.content import PortfolioContentRead
from app.schemas.experience import ExperienceCreate, ExperienceRead, ExperienceUpdate
from app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from app.schemas.skills import SkillCreate, SkillRead, SkillUpdate
from app.schemas.user import UserCreate, UserRecord
from app.storage.base import PortfolioStore, as_utc, next_timestamp, utc_now


logger = logging.getLogger(__name__)

_Row = TypeVar("_Row", bound=Base)


def _content_read(row: PortfolioContent) -> PortfolioContentRead:
    return PortfolioContentRead(
        id=row.id,
        section=row.section,
        content=copy.deepcopy(row.content or {}),
        last_updated=as_utc(row.last_updated),
    )


def _message_read(row: ContactMessage) -> ContactMessageRead:
    out = ContactMessageRead.model_validate(row)
    return out.model_copy(update={"created_at": as_utc(row.created_at)})


class SqlStore(PortfolioStore):
    """SQLAlchemy-backed store bound to one request-scoped session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def _commit(self, row: _Row | None = None) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError:
            self.db.rollback()
            raise
        if row is not None:
            self.db.refresh(row)

    def _apply(self, row: _Row, changes: dict[str, Any]) -> _Row:
        for field, value in changes.items():
            setattr(row, field, value)
        self.db.add(row)
        self._commit(row)
        return row

    def _delete(self, model: type[_Row], row_id: int) -> bool:
        row = self.db.get(model, row_id)
        if row is None:
            return False
        self.db.delete(row)
        self._commit()
        return True

    # Portfolio content
    def get_content(self, section: str) -> PortfolioContentRead | None:
        row = self.db.query(PortfolioContent).filter(PortfolioContent.section == section).first()
        return _content_read(row) if row else None

    def list_content(self) -> list[PortfolioContentRead]:
        rows = self.db.query(PortfolioContent).order_by(PortfolioContent.id.asc()).all()
        return [_content_read(row) for row in rows]

    def _content_row(self, section: str) -> PortfolioContent | None:
        return self.db.query(PortfolioContent).filter(PortfolioContent.section == section).first()

    def _replace_content(self, row: PortfolioContent, document: dict[str, Any]) -> None:
        # Reassign, not mutate: the JSON column does not track in-place changes.
        row.content = document
        row.last_updated = next_timestamp(row.last_updated)
        self._commit(row)

    def upsert_content(self, section: str, document: dict[str, Any]) -> PortfolioContentRead:
        row = self._content_row(section)
        if row is not None:
            self._replace_content(row, document)
        else:
            row = PortfolioContent(section=section, content=document, last_updated=utc_now())
            self.db.add(row)
            try:
                self._commit(row)
            except IntegrityError:
                # Another writer created the section first; overwrite its row.
                row = self._content_row(section)
                if row is None:
                    raise
                self._replace_content(row, document)
        logger.info("content.upsert section=%s", section)
        return _content_read(row)

    # Skills
    def list_skills(self, category: str | None = None, *, visible_only: bool = False) -> list[SkillRead]:
        query = self.db.query(Skill)
        if category is not None:
            query = query.filter(Skill.category == category)
        if visible_only:
            query = query.filter(Skill.is_visible.is_(True))
        return [SkillRead.model_validate(row) for row in query.order_by(Skill.id.asc()).all()]

    def get_skill(self, skill_id: int) -> SkillRead | None:
        row = self.db.get(Skill, skill_id)
        return SkillRead.model_validate(row) if row else None

    def create_skill(self, skill: SkillCreate) -> SkillRead:
        row = Skill(**skill.model_dump())
        self.db.add(row)
        self._commit(row)
        return SkillRead.model_validate(row)

    def update_skill(self, skill_id: int, update: SkillUpdate) -> SkillRead | None:
        row = self.db.get(Skill, skill_id)
        if row is None:
            return None
        return SkillRead.model_validate(self._apply(row, update.changes()))

    def delete_skill(self, skill_id: int) -> bool:
        return self._delete(Skill, skill_id)

    # Experiences
    def list_experiences(self, *, visible_only: bool = False) -> list[ExperienceRead]:
        query = self.db.query(Experience)
        if visible_only:
            query = query.filter(Experience.is_visible.is_(True))
        rows = query.order_by(Experience.order.asc(), Experience.id.asc()).all()
        return [ExperienceRead.model_validate(row) for row in rows]

    def create_experience(self, experience: ExperienceCreate) -> ExperienceRead:
        row = Experience(**experience.model_dump())
        self.db.add(row)
        self._commit(row)
        return ExperienceRead.model_validate(row)

    def update_experience(self, experience_id: int, update: ExperienceUpdate) -> ExperienceRead | None:
        row = self.db.get(Experience, experience_id)
        if row is None:
            return None
        return ExperienceRead.model_validate(self._apply(row, update.changes()))

    def delete_experience(self, experience_id: int) -> bool:
        return self._delete(Experience, experience_id)

    # Projects
    def list_projects(self, *, visible_only: bool = False) -> list[ProjectRead]:
        query = self.db.query(Project)
        if visible_only:
            query = query.filter(Project.is_visible.is_(True))
        return [ProjectRead.model_validate(row) for row in query.order_by(Project.id.asc()).all()]

    def list_featured_projects(self) -> list[ProjectRead]:
        rows = (
            self.db.query(Project)
            .filter(Project.is_featured.is_(True))
            .filter(Project.is_visible.is_(True))
            .order_by(Project.id.asc())
            .all()
        )
        return [ProjectRead.model_validate(row) for row in rows]

    def create_project(self, project: ProjectCreate) -> ProjectRead:
        row = Project(**project.model_dump())
        self.db.add(row)
        self._commit(row)
        return ProjectRead.model_validate(row)

    def update_project(self, project_id: int, update: ProjectUpdate) -> ProjectRead | None:
        row = self.db.get(Project, project_id)
        if row is None:
            return None
        return ProjectRead.model_validate(self._apply(row, update.changes()))

    def delete_project(self, project_id: int) -> bool:
        return self._delete(Project, project_id)

    # Contact messages
    def list_messages(self) -> list[ContactMessageRead]:
        rows = self.db.query(ContactMessage).order_by(ContactMessage.created_at.desc(), ContactMessage.id.desc()).all()
        return [_message_read(row) for row in rows]

    def create_message(self, message: ContactMessageCreate) -> ContactMessageRead:
        row = ContactMessage(**message.model_dump(), created_at=utc_now(), is_read=False)
        self.db.add(row)
        self._commit(row)
        logger.info("contact.created id=%s", row.id)
        return _message_read(row)

    def mark_message_read(self, message_id: int) -> bool:
        row = self.db.get(ContactMessage, message_id)
        if row is None:
            return False
        self._apply(row, {"is_read": True})
        return True

    def delete_message(self, message_id: int) -> bool:
        return self._delete(ContactMessage, message_id)

    # Users
    def get_user_by_username(self, username: str) -> UserRecord | None:
        row = self.db.query(User).filter(User.username == username).first()
        return UserRecord.model_validate(row) if row else None

    def create_user(self, user: UserCreate) -> UserRecord:
        row = User(**user.model_dump())
        self.db.add(row)
        self._commit(row)
        return UserRecord.model_validate(row)
