# portfolio/models/site_settings.py
from __future__ import annotations

from sqlalchemy import Boolean, CheckConstraint, Column, String

from portfolio.database import Base, UTCDateTime, utcnow

SETTINGS_ID = "settings"


class SiteSettings(Base):
    """Site toggles that have no home on the Profile row."""

    __tablename__ = "site_settings"
    __table_args__ = (CheckConstraint(f"id = '{SETTINGS_ID}'", name="ck_site_settings_singleton"),)

    id = Column(String(16), primary_key=True, default=SETTINGS_ID)

    maintenance_mode = Column(Boolean, default=False, nullable=False)
    analytics_enabled = Column(Boolean, default=True, nullable=False)
    email_notifications = Column(Boolean, default=True, nullable=False)
    theme = Column(String(10), default="dark", nullable=False)

    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
