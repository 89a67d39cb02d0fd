# dependencies.py
import hmac
import logging
from dataclasses import dataclass
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session
from app.config import is_memory_backend, settings
from app.database import get_db
from app.errors import AuthError
from app.storage import PortfolioStore, SqlStore
from app.utils.jwt_handler import decode_access_token


logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


@dataclass(frozen=True)
class AdminSession:
    username: str
    # "shared-secret" or "jwt"
    method: str


def get_store(request: Request, db: Session = Depends(get_db)) -> PortfolioStore:
    # The session is lazy; the memory backend never touches it.
    if is_memory_backend(settings):
        return request.app.state.memory_store
    return SqlStore(db)


def _matches_shared_secret(token: str) -> bool:
    if not settings.accept_shared_secret or not settings.admin_token:
        return False
    return hmac.compare_digest(token.encode("utf-8"), settings.admin_token.encode("utf-8"))


def authenticate_token(token: str | None, store: PortfolioStore) -> AdminSession:
    if not token:
        raise AuthError("Not authenticated")

    # The static shared secret is a known weak scheme kept for older clients:
    # it never expires and cannot be revoked.
    if _matches_shared_secret(token):
        return AdminSession(username=settings.admin_username, method="shared-secret")

    payload = decode_access_token(token)
    username = payload.get("sub")
    if not username or payload.get("adm") is not True:
        raise AuthError("Invalid token payload")

    user = store.get_user_by_username(str(username))
    if user is not None and not user.is_admin:
        raise AuthError("Admin access required")
    if user is None and str(username) != settings.admin_username:
        raise AuthError("User not found")
    return AdminSession(username=str(username), method="jwt")


def require_admin(
    request: Request,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    store: PortfolioStore = Depends(get_store),
) -> AdminSession:
    token = credentials.credentials if credentials else None
    try:
        return authenticate_token(token, store)
    except AuthError as exc:
        logger.info("admin.denied method=%s path=%s reason=%s", request.method, request.url.path, exc.message)
        raise
