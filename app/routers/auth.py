# auth.py
import hmac
import logging
from datetime import timedelta
from fastapi import APIRouter, Depends
from fastapi.security import HTTPAuthorizationCredentials
from app.config import settings
from app.errors import AuthError
from app.routers.dependencies import authenticate_token, bearer_scheme, get_store
from app.schemas.auth import LoginRequest, SessionStatus, Token
from app.storage import PortfolioStore
from app.utils.jwt_handler import create_access_token
from app.utils.password_hash import verify_password


router = APIRouter(prefix="/auth", tags=["auth"])

logger = logging.getLogger(__name__)


def _matches_configured_pair(username: str, password: str) -> bool:
    same_user = hmac.compare_digest(username.encode("utf-8"), settings.admin_username.encode("utf-8"))
    same_password = hmac.compare_digest(password.encode("utf-8"), settings.admin_password.encode("utf-8"))
    return same_user and same_password


@router.post("/login", response_model=Token)
def login(body: LoginRequest, store: PortfolioStore = Depends(get_store)) -> Token:
    user = store.get_user_by_username(body.username)
    valid = bool(user and user.is_admin and verify_password(body.password, user.password))
    if not valid:
        valid = _matches_configured_pair(body.username, body.password)
    if not valid:
        logger.info("auth.login failed username=%s", body.username)
        raise AuthError("Invalid credentials")

    expires_delta = timedelta(minutes=settings.access_token_expire_minutes)
    token = create_access_token({"sub": body.username, "adm": True}, expires_delta)
    logger.info("auth.login ok username=%s", body.username)
    return Token(access_token=token, token_type="bearer", expires_in=int(expires_delta.total_seconds()))


@router.get("/session", response_model=SessionStatus)
def read_session(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    store: PortfolioStore = Depends(get_store),
) -> SessionStatus:
    token = credentials.credentials if credentials else None
    try:
        session = authenticate_token(token, store)
    except AuthError:
        return SessionStatus(authenticated=False)
    return SessionStatus(authenticated=True, username=session.username)
