from fastapi import APIRouter, Depends

from app.routers.dependencies import get_store
from app.schemas.experience import ExperienceRead
from app.storage import PortfolioStore


router = APIRouter(prefix="/experiences", tags=["experiences"])


@router.get("", response_model=list[ExperienceRead])
def list_visible_experiences(store: PortfolioStore = Depends(get_store)) -> list[ExperienceRead]:
    return store.list_experiences(visible_only=True)
