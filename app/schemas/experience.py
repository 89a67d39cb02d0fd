from typing import ClassVar

from pydantic import Field

from app.schemas.base import CamelModel, PartialUpdate


class ExperienceBase(CamelModel):
    position: str = Field(min_length=1, max_length=255)
    company: str = Field(min_length=1, max_length=255)
    description: str = Field(min_length=1)
    start_date: str = Field(min_length=1, max_length=32)
    # None = current position.
    end_date: str | None = Field(default=None, max_length=32)
    is_visible: bool = True
    order: int = 0


class ExperienceCreate(ExperienceBase):
    pass


class ExperienceUpdate(PartialUpdate):
    nullable_fields: ClassVar[frozenset[str]] = frozenset({"end_date"})

    position: str | None = Field(default=None, min_length=1, max_length=255)
    company: str | None = Field(default=None, min_length=1, max_length=255)
    description: str | None = Field(default=None, min_length=1)
    start_date: str | None = Field(default=None, min_length=1, max_length=32)
    end_date: str | None = Field(default=None, max_length=32)
    is_visible: bool | None = None
    order: int | None = None


class ExperienceRead(CamelModel):
    id: int
    position: str
    company: str
    description: str
    start_date: str
    end_date: str | None = None
    is_visible: bool = True
    order: int = 0
