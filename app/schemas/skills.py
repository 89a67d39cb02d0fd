from pydantic import Field

from app.schemas.base import CamelModel, PartialUpdate


class SkillBase(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    category: str = Field(min_length=1, max_length=255)
    proficiency: int = Field(ge=0, le=100)
    is_visible: bool = True


class SkillCreate(SkillBase):
    pass


class SkillUpdate(PartialUpdate):
    name: str | None = Field(default=None, min_length=1, max_length=255)
    category: str | None = Field(default=None, min_length=1, max_length=255)
    proficiency: int | None = Field(default=None, ge=0, le=100)
    is_visible: bool | None = None


class SkillRead(CamelModel):
    id: int
    name: str
    category: str
    proficiency: int
    is_visible: bool = True
