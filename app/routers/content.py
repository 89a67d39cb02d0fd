from fastapi import APIRouter, Depends

from app.errors import NotFoundError
from app.routers.dependencies import get_store
from app.schemas.content import PortfolioContentRead
from app.storage import PortfolioStore


router = APIRouter(prefix="/content", tags=["content"])


@router.get("", response_model=list[PortfolioContentRead])
def list_content(store: PortfolioStore = Depends(get_store)) -> list[PortfolioContentRead]:
    return store.list_content()


@router.get("/{section}", response_model=PortfolioContentRead)
def read_content(section: str, store: PortfolioStore = Depends(get_store)) -> PortfolioContentRead:
    content = store.get_content(section)
    if content is None:
        raise NotFoundError("Content section not found")
    return content
