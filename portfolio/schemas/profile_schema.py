# portfolio/schemas/profile_schema.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import EmailStr, Field

from portfolio.schemas.common import CamelModel, OptionalText, OptionalUrl, UrlOrPath


class ProfileUpdate(CamelModel):
    name: str = Field(min_length=1, max_length=100)
    title: str = Field(min_length=1, max_length=100)
    bio: str = Field(min_length=1, max_length=1000)
    email: EmailStr
    phone: OptionalText = None
    location: OptionalText = None
    website: OptionalUrl = None
    github: OptionalUrl = None
    linkedin: OptionalUrl = None
    twitter: OptionalUrl = None
    profile_image: UrlOrPath = None


class ProfileRead(CamelModel):
    id: str
    name: str
    title: str
    bio: str
    email: str
    phone: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    github: Optional[str] = None
    linkedin: Optional[str] = None
    twitter: Optional[str] = None
    profile_image: Optional[str] = None
    created_at: datetime
    updated_at: datetime
