# portfolio/schemas/skill_schema.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from portfolio.schemas.common import CamelModel, OptionalUrl


class SkillCreate(CamelModel):
    name: str = Field(min_length=1, max_length=50)
    category: str = Field(min_length=1, max_length=50)
    level: int = Field(ge=1, le=5)
    icon_url: OptionalUrl = None
    order: int = Field(0, ge=0)


class SkillUpdate(CamelModel):
    name: str = Field(None, min_length=1, max_length=50)
    category: str = Field(None, min_length=1, max_length=50)
    level: int = Field(None, ge=1, le=5)
    icon_url: OptionalUrl = None
    order: int = Field(None, ge=0)


class SkillRead(CamelModel):
    id: str
    name: str
    category: str
    level: int
    icon_url: Optional[str] = None
    order: int
    created_at: datetime
    updated_at: datetime
