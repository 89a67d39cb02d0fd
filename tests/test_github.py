from __future__ import annotations

from typing import Any

import requests

from app.config import settings
from app.data.github_repos import FALLBACK_REPOS
from app.services import github_service


class _FakeResponse:
    def __init__(self, payload: Any, status_code: int = 200) -> None:
        self._payload = payload
        self.status_code = status_code

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} error")

    def json(self) -> Any:
        return self._payload


LIVE_REPO = {
    "id": 1,
    "name": "live-repo",
    "html_url": "https://github.com/someone/live-repo",
    "description": None,
    "language": "Python",
    "stargazers_count": 3,
    "forks_count": 1,
    "topics": ["python"],
    "private": False,
}


def test_fallback_is_served_without_a_token(client, monkeypatch) -> None:
    def _boom(*_args, **_kwargs):
        raise AssertionError("GitHub must not be called without a token")

    monkeypatch.setattr(github_service.requests, "get", _boom)
    r = client.get("/api/github/repos")
    assert r.status_code == 200
    assert r.json() == FALLBACK_REPOS


def test_live_repositories_are_passed_through(client, monkeypatch) -> None:
    calls: list[dict[str, Any]] = []

    def _fake_get(url, **kwargs):
        calls.append({"url": url, **kwargs})
        return _FakeResponse([LIVE_REPO])

    monkeypatch.setattr(settings, "github_token", "ghp_test")
    monkeypatch.setattr(github_service.requests, "get", _fake_get)

    r = client.get("/api/github/repos")
    assert r.status_code == 200
    body = r.json()
    assert [repo["name"] for repo in body] == ["live-repo"]
    assert "private" not in body[0]

    assert calls[0]["url"].endswith(f"/users/{settings.github_username}/repos")
    assert calls[0]["params"] == {"sort": "updated", "per_page": 10}
    assert calls[0]["headers"]["Authorization"] == "Bearer ghp_test"
    assert calls[0]["timeout"] == settings.github_timeout_seconds


def test_github_failures_fall_back(client, monkeypatch) -> None:
    monkeypatch.setattr(settings, "github_token", "ghp_test")

    def _offline(*_args, **_kwargs):
        raise requests.ConnectionError("offline")

    monkeypatch.setattr(github_service.requests, "get", _offline)
    assert client.get("/api/github/repos").json() == FALLBACK_REPOS

    monkeypatch.setattr(github_service.requests, "get", lambda *a, **k: _FakeResponse({"message": "Bad"}, 401))
    assert client.get("/api/github/repos").json() == FALLBACK_REPOS

    monkeypatch.setattr(github_service.requests, "get", lambda *a, **k: _FakeResponse({"message": "not a list"}))
    assert client.get("/api/github/repos").json() == FALLBACK_REPOS
