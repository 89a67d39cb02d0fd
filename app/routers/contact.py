from fastapi import APIRouter, Depends, status

from app.routers.dependencies import get_store
from app.schemas.contact import ContactMessageCreate, ContactMessageRead
from app.storage import PortfolioStore


router = APIRouter(tags=["contact"])


@router.post("/contact", response_model=ContactMessageRead, status_code=status.HTTP_201_CREATED)
def submit_contact_message(
    payload: ContactMessageCreate,
    store: PortfolioStore = Depends(get_store),
) -> ContactMessageRead:
    return store.create_message(payload)
