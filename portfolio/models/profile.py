# portfolio/models/profile.py
from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, String, Text

from portfolio.database import Base, UTCDateTime, utcnow

PROFILE_ID = "profile"


class Profile(Base):
    """The site owner's profile. Exactly one row, keyed ``'profile'``."""

    __tablename__ = "profile"
    __table_args__ = (CheckConstraint(f"id = '{PROFILE_ID}'", name="ck_profile_singleton"),)

    id = Column(String(16), primary_key=True, default=PROFILE_ID)

    name = Column(String(100), nullable=False)
    title = Column(String(100), nullable=False)
    bio = Column(Text, nullable=False)
    email = Column(String(200), nullable=False)

    phone = Column(String(50), nullable=True)
    location = Column(String(100), nullable=True)

    website = Column(String(500), nullable=True)
    github = Column(String(500), nullable=True)
    linkedin = Column(String(500), nullable=True)
    twitter = Column(String(500), nullable=True)
    profile_image = Column(String(500), nullable=True)

    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
