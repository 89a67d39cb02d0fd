from fastapi import APIRouter

from app.schemas.github import GithubRepo
from app.services.github_service import get_repositories


router = APIRouter(prefix="/github", tags=["github"])


@router.get("/repos", response_model=list[GithubRepo])
def list_github_repos() -> list[GithubRepo]:
    return get_repositories()
