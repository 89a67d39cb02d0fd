from __future__ import annotations

import logging
from typing import Any

import requests

from app.config import Settings, settings
from app.data.github_repos import FALLBACK_REPOS
from app.schemas.github import GithubRepo


logger = logging.getLogger(__name__)


def fallback_repos() -> list[GithubRepo]:
    return [GithubRepo.model_validate(item) for item in FALLBACK_REPOS]


def _fetch_from_github(cfg: Settings) -> list[dict[str, Any]]:
    url = f"{cfg.github_api_url.rstrip('/')}/users/{cfg.github_username}/repos"
    response = requests.get(
        url,
        params={"sort": "updated", "per_page": 10},
        headers={
            "Accept": "application/vnd.github+json",
            "Authorization": f"Bearer {cfg.github_token}",
        },
        timeout=cfg.github_timeout_seconds,
    )
    response.raise_for_status()
    payload = response.json()
    if not isinstance(payload, list):
        raise ValueError(f"unexpected GitHub payload type: {type(payload).__name__}")
    return payload


def get_repositories(cfg: Settings | None = None) -> list[GithubRepo]:
    """Latest repositories of the configured GitHub user.

    Without a token, or when GitHub cannot be reached or answers with
    something unusable, the static fallback list is returned instead.
    """
    cfg = cfg or settings
    if not cfg.github_token:
        return fallback_repos()

    try:
        items = _fetch_from_github(cfg)
        return [GithubRepo.model_validate(item) for item in items]
    except (requests.RequestException, ValueError) as exc:
        # pydantic.ValidationError is a ValueError.
        logger.warning("github.fetch failed user=%s error=%s; serving fallback", cfg.github_username, exc)
        return fallback_repos()
