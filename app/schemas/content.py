from __future__ import annotations

from datetime import datetime
from typing import Annotated, Any, Literal, Union

from pydantic import ConfigDict, Field, TypeAdapter

from app.schemas.base import CamelModel


class SectionDocument(CamelModel):
    # Documents are stored as sent: only the camelCase keys are accepted and
    # unknown keys are refused up front.
    model_config = ConfigDict(extra="forbid", populate_by_name=False)


class HeroContent(SectionDocument):
    title: str
    subtitle: str
    description: str
    photo_url: str
    cv_url: str


class Certification(SectionDocument):
    name: str
    issuer: str


class AboutContent(SectionDocument):
    title: str
    paragraphs: list[str] = Field(default_factory=list)
    education: str
    language: str
    location: str
    relocate: str
    certifications: list[Certification] = Field(default_factory=list)


class ContactContent(SectionDocument):
    title: str
    description: str
    email: str
    linkedin: str
    github: str
    location: str
    relocate: str
    dio_profile: str | None = None


class HeroSection(CamelModel):
    section: Literal["hero"]
    content: HeroContent


class AboutSection(CamelModel):
    section: Literal["about"]
    content: AboutContent


class ContactSection(CamelModel):
    section: Literal["contact"]
    content: ContactContent


SectionUpdate = Annotated[Union[HeroSection, AboutSection, ContactSection], Field(discriminator="section")]

KNOWN_SECTIONS: tuple[str, ...] = ("hero", "about", "contact")

_section_adapter: TypeAdapter[HeroSection | AboutSection | ContactSection] = TypeAdapter(SectionUpdate)


def parse_section_document(section: str, document: Any) -> dict[str, Any]:
    """Validate ``document`` against the shape registered for ``section``.

    Returns the JSON-ready document (camelCase keys, only the keys that were
    sent). Raises ``pydantic.ValidationError`` on a malformed body; callers are
    expected to have checked ``section`` against ``KNOWN_SECTIONS`` first.
    """
    parsed = _section_adapter.validate_python({"section": section, "content": document})
    return parsed.content.model_dump(by_alias=True, exclude_unset=True, mode="json")


class PortfolioContentRead(CamelModel):
    id: int
    section: str
    content: dict[str, Any]
    last_updated: datetime
