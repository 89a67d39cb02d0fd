from typing import Annotated, ClassVar

from pydantic import BeforeValidator, Field

from app.schemas.base import CamelModel, PartialUpdate


MAX_TAGS = 5


def _clean_tags(v):
    if isinstance(v, list):
        return [str(tag).strip() for tag in v if str(tag).strip()]
    return v


# Ordered, blank entries dropped, at most MAX_TAGS.
Tags = Annotated[list[str], BeforeValidator(_clean_tags), Field(max_length=MAX_TAGS)]


class ProjectBase(CamelModel):
    title: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    tags: Tags = Field(default_factory=list)
    repo_url: str | None = Field(default=None, max_length=512)
    demo_url: str | None = Field(default=None, max_length=512)
    is_visible: bool = True
    is_featured: bool = False


class ProjectCreate(ProjectBase):
    pass


class ProjectUpdate(PartialUpdate):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"repo_url", "demo_url"})

    title: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    tags: Tags | None = None
    repo_url: str | None = Field(default=None, max_length=512)
    demo_url: str | None = Field(default=None, max_length=512)
    is_visible: bool | None = None
    is_featured: bool | None = None


class ProjectRead(CamelModel):
    # Stored rows are served as-is; the create-time limits are not re-applied.
    id: int
    title: str
    description: str
    tags: list[str] = Field(default_factory=list)
    repo_url: str | None = None
    demo_url: str | None = None
    is_visible: bool = True
    is_featured: bool = False
