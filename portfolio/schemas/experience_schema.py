# portfolio/schemas/experience_schema.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from portfolio.schemas.common import CamelModel, OptionalUtcDateTime, UtcDateTime

END_BEFORE_START = "End date must be after start date"
CURRENT_WITH_END = "Current experience cannot have an end date"


def timeline_error(start_date: datetime, end_date: Optional[datetime], current: bool) -> Optional[str]:
    """Return the violated timeline rule, if any."""
    if end_date is not None and end_date <= start_date:
        return END_BEFORE_START
    if current and end_date is not None:
        return CURRENT_WITH_END
    return None


class ExperienceCreate(CamelModel):
    company: str = Field(min_length=1, max_length=100)
    role: str = Field(min_length=1, max_length=100)
    start_date: UtcDateTime
    end_date: OptionalUtcDateTime = None
    description: str = Field(min_length=1, max_length=1000)
    current: bool = False
    order: int = Field(0, ge=0)


class ExperienceUpdate(CamelModel):
    company: str = Field(None, min_length=1, max_length=100)
    role: str = Field(None, min_length=1, max_length=100)
    start_date: UtcDateTime = None
    # explicit null or "" clears the stored end date
    end_date: OptionalUtcDateTime = None
    description: str = Field(None, min_length=1, max_length=1000)
    current: bool = None
    order: int = Field(None, ge=0)


class ExperienceRead(CamelModel):
    id: str
    company: str
    role: str
    start_date: datetime
    end_date: Optional[datetime] = None
    description: str
    current: bool
    order: int
    created_at: datetime
    updated_at: datetime
