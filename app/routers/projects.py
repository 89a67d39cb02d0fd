from fastapi import APIRouter, Depends

from app.routers.dependencies import get_store
from app.schemas.project import ProjectRead
from app.storage import PortfolioStore


router = APIRouter(tags=["projects"])


@router.get("/projects", response_model=list[ProjectRead])
def list_visible_projects(store: PortfolioStore = Depends(get_store)) -> list[ProjectRead]:
    return store.list_projects(visible_only=True)


@router.get("/projects/featured", response_model=list[ProjectRead])
def list_featured_projects(store: PortfolioStore = Depends(get_store)) -> list[ProjectRead]:
    return store.list_featured_projects()


# Older clients still call this path.
@router.get("/featured-projects", response_model=list[ProjectRead], include_in_schema=False)
def list_featured_projects_legacy(store: PortfolioStore = Depends(get_store)) -> list[ProjectRead]:
    return store.list_featured_projects()
