# portfolio/schemas/settings_schema.py
from __future__ import annotations

from typing import Literal

from pydantic import EmailStr, Field

from portfolio.schemas.common import CamelModel

Theme = Literal["light", "dark"]


class SettingsUpdate(CamelModel):
    site_title: str = Field(min_length=1, max_length=100)
    site_description: str = Field(min_length=1, max_length=500)
    contact_email: EmailStr
    maintenance_mode: bool = False
    analytics_enabled: bool = True
    email_notifications: bool = True
    theme: Theme = "dark"


class SettingsRead(CamelModel):
    site_title: str
    site_description: str
    contact_email: str
    maintenance_mode: bool
    analytics_enabled: bool
    email_notifications: bool
    theme: Theme
