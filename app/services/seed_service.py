from __future__ import annotations

import logging
from dataclasses import dataclass, field

from app.config import settings
from app.data.defaults import DEFAULT_EXPERIENCES, DEFAULT_PROJECTS, DEFAULT_SECTIONS, DEFAULT_SKILLS
from app.schemas.experience import ExperienceCreate
from app.schemas.project import ProjectCreate
from app.schemas.skills import SkillCreate
from app.schemas.user import UserCreate
from app.storage.base import PortfolioStore
from app.utils.password_hash import hash_password


logger = logging.getLogger(__name__)


@dataclass
class SeedReport:
    admin_created: bool = False
    sections_created: list[str] = field(default_factory=list)
    skills_created: int = 0
    experiences_created: int = 0
    projects_created: int = 0


def seed_store(store: PortfolioStore) -> SeedReport:
    """Populate defaults into an empty store.

    Each group is only written when it is empty, so running this twice is a
    no-op. There is no transaction around the whole run: an interruption can
    leave some groups seeded and others not, and the next run fills the gaps.
    """
    report = SeedReport()

    if store.get_user_by_username(settings.admin_username) is None:
        store.create_user(
            UserCreate(
                username=settings.admin_username,
                password=hash_password(settings.admin_password),
                is_admin=True,
            )
        )
        report.admin_created = True
        logger.info("seed: created admin user username=%s", settings.admin_username)

    for section, document in DEFAULT_SECTIONS.items():
        if store.get_content(section) is None:
            store.upsert_content(section, document)
            report.sections_created.append(section)
            logger.info("seed: created %s section content", section)

    if not store.list_skills():
        for skill in DEFAULT_SKILLS:
            store.create_skill(SkillCreate(**skill))
        report.skills_created = len(DEFAULT_SKILLS)
        logger.info("seed: added %d default skills", report.skills_created)

    if not store.list_experiences():
        for experience in DEFAULT_EXPERIENCES:
            store.create_experience(ExperienceCreate(**experience))
        report.experiences_created = len(DEFAULT_EXPERIENCES)
        logger.info("seed: added %d default experiences", report.experiences_created)

    if not store.list_projects():
        for project in DEFAULT_PROJECTS:
            store.create_project(ProjectCreate(**project))
        report.projects_created = len(DEFAULT_PROJECTS)
        logger.info("seed: added %d default projects", report.projects_created)

    return report
