from fastapi import APIRouter, Depends, Query

from app.routers.dependencies import get_store
from app.schemas.skills import SkillRead
from app.storage import PortfolioStore


router = APIRouter(prefix="/skills", tags=["skills"])


@router.get("", response_model=list[SkillRead])
def list_visible_skills(
    category: str | None = Query(default=None, description="Only skills in this category"),
    store: PortfolioStore = Depends(get_store),
) -> list[SkillRead]:
    return store.list_skills(category, visible_only=True)


@router.get("/{category}", response_model=list[SkillRead])
def list_visible_skills_by_category(category: str, store: PortfolioStore = Depends(get_store)) -> list[SkillRead]:
    return store.list_skills(category, visible_only=True)
