from __future__ import annotations

import re
from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel


_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


class ContactMessageCreate(CamelModel):
    name: str = Field(min_length=2, max_length=255)
    email: str = Field(max_length=255)
    subject: str = Field(min_length=5, max_length=255)
    message: str = Field(min_length=10)

    @field_validator("email")
    @classmethod
    def _validate_email_like(cls, v: str) -> str:
        value = (v or "").strip()
        if not _EMAIL_RE.match(value):
            raise ValueError("email must be a valid email address")
        return value


class ContactMessageRead(CamelModel):
    id: int
    name: str
    email: str
    subject: str
    message: str
    created_at: datetime
    is_read: bool = False
