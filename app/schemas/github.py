from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GithubRepo(BaseModel):
    """Subset of GitHub's repository payload, passed through in GitHub's own field names."""

    id: int
    name: str
    html_url: str
    description: str | None = None
    language: str | None = None
    stargazers_count: int = 0
    forks_count: int = 0
    topics: list[str] = Field(default_factory=list)

    model_config = ConfigDict(extra="ignore")
