from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, File, UploadFile, status
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError

from app.config import settings
from app.errors import NotFoundError
from app.routers.dependencies import AdminSession, get_store, require_admin
from app.schemas.base import SuccessResponse
from app.schemas.contact import ContactMessageRead
from app.schemas.content import KNOWN_SECTIONS, PortfolioContentRead, parse_section_document
from app.schemas.experience import ExperienceCreate, ExperienceRead, ExperienceUpdate
from app.schemas.project import ProjectCreate, ProjectRead, ProjectUpdate
from app.schemas.skills import SkillCreate, SkillRead, SkillUpdate
from app.schemas.upload import UploadResponse
from app.services.upload_service import save_upload
from app.storage import PortfolioStore


router = APIRouter(prefix="/admin", tags=["admin"])

logger = logging.getLogger(__name__)


def _found(value: Any, what: str) -> Any:
    if value is None or value is False:
        raise NotFoundError(f"{what} not found")
    return value


# Content sections


@router.put("/content/{section}", response_model=PortfolioContentRead)
def replace_content_section(
    section: str,
    document: dict[str, Any] = Body(...),
    store: PortfolioStore = Depends(get_store),
    admin: AdminSession = Depends(require_admin),
) -> PortfolioContentRead:
    if section not in KNOWN_SECTIONS:
        raise NotFoundError("Content section not found")
    try:
        validated = parse_section_document(section, document)
    except ValidationError as exc:
        # Report as a request error; any other ValidationError is a server fault.
        raise RequestValidationError(exc.errors()) from exc
    logger.info("admin.content.replace section=%s by=%s", section, admin.username)
    return store.upsert_content(section, validated)


# Skills


@router.get("/skills", response_model=list[SkillRead])
def list_all_skills(
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> list[SkillRead]:
    return store.list_skills()


@router.post("/skills", response_model=SkillRead, status_code=status.HTTP_201_CREATED)
def create_skill(
    payload: SkillCreate,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> SkillRead:
    return store.create_skill(payload)


@router.put("/skills/{skill_id}", response_model=SkillRead)
def update_skill(
    skill_id: int,
    payload: SkillUpdate,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> SkillRead:
    return _found(store.update_skill(skill_id, payload), "Skill")


@router.delete("/skills/{skill_id}", response_model=SuccessResponse)
def delete_skill(
    skill_id: int,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> SuccessResponse:
    _found(store.delete_skill(skill_id), "Skill")
    return SuccessResponse()


# Experiences


@router.get("/experiences", response_model=list[ExperienceRead])
def list_all_experiences(
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> list[ExperienceRead]:
    return store.list_experiences()


@router.post("/experiences", response_model=ExperienceRead, status_code=status.HTTP_201_CREATED)
def create_experience(
    payload: ExperienceCreate,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> ExperienceRead:
    return store.create_experience(payload)


@router.put("/experiences/{experience_id}", response_model=ExperienceRead)
def update_experience(
    experience_id: int,
    payload: ExperienceUpdate,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> ExperienceRead:
    return _found(store.update_experience(experience_id, payload), "Experience")


@router.delete("/experiences/{experience_id}", response_model=SuccessResponse)
def delete_experience(
    experience_id: int,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> SuccessResponse:
    _found(store.delete_experience(experience_id), "Experience")
    return SuccessResponse()


# Projects


@router.get("/projects", response_model=list[ProjectRead])
def list_all_projects(
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> list[ProjectRead]:
    return store.list_projects()


@router.post("/projects", response_model=ProjectRead, status_code=status.HTTP_201_CREATED)
def create_project(
    payload: ProjectCreate,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> ProjectRead:
    return store.create_project(payload)


@router.put("/projects/{project_id}", response_model=ProjectRead)
def update_project(
    project_id: int,
    payload: ProjectUpdate,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> ProjectRead:
    return _found(store.update_project(project_id, payload), "Project")


@router.delete("/projects/{project_id}", response_model=SuccessResponse)
def delete_project(
    project_id: int,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> SuccessResponse:
    _found(store.delete_project(project_id), "Project")
    return SuccessResponse()


# Contact messages


@router.get("/contact-messages", response_model=list[ContactMessageRead])
def list_contact_messages(
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> list[ContactMessageRead]:
    return store.list_messages()


@router.patch("/contact-messages/{message_id}/read", response_model=SuccessResponse)
def mark_contact_message_read(
    message_id: int,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> SuccessResponse:
    _found(store.mark_message_read(message_id), "Message")
    return SuccessResponse()


@router.delete("/contact-messages/{message_id}", response_model=SuccessResponse)
def delete_contact_message(
    message_id: int,
    store: PortfolioStore = Depends(get_store),
    _admin: AdminSession = Depends(require_admin),
) -> SuccessResponse:
    _found(store.delete_message(message_id), "Message")
    return SuccessResponse()


# Uploads


@router.post("/upload", response_model=UploadResponse)
async def upload_file(
    file: UploadFile = File(...),
    _admin: AdminSession = Depends(require_admin),
) -> UploadResponse:
    # One byte past the limit is enough to know the file is too large.
    data = await file.read(settings.max_upload_bytes + 1)
    file_path = save_upload(file.filename, file.content_type, data)
    return UploadResponse(file_path=file_path)
