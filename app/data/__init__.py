# __init__.py
from app.data.defaults import DEFAULT_EXPERIENCES, DEFAULT_PROJECTS, DEFAULT_SECTIONS, DEFAULT_SKILLS
from app.data.github_repos import FALLBACK_REPOS

__all__ = [
    "DEFAULT_EXPERIENCES",
    "DEFAULT_PROJECTS",
    "DEFAULT_SECTIONS",
    "DEFAULT_SKILLS",
    "FALLBACK_REPOS",
]
