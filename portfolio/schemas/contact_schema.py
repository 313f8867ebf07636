# portfolio/schemas/contact_schema.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator, EmailStr, Field

from portfolio.schemas.common import CamelModel


def _max_200(value: str) -> str:
    if len(value) > 200:
        raise ValueError("Email must be at most 200 characters")
    return value


class ContactCreate(CamelModel):
    name: str = Field(min_length=2, max_length=100)
    email: Annotated[EmailStr, AfterValidator(_max_200)]
    message: str = Field(min_length=10, max_length=2000)


# contacts are immutable apart from the read flag
class ContactUpdate(CamelModel):
    read: bool


class ContactRead(CamelModel):
    id: str
    name: str
    email: str
    message: str
    read: bool
    created_at: datetime
    updated_at: datetime
