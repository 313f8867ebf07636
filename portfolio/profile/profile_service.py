# portfolio/profile/profile_service.py
from __future__ import annotations

from sqlalchemy.orm import Session

from portfolio.config import PROFILE_DEFAULTS
from portfolio.models.profile import PROFILE_ID, Profile
from portfolio.store import get_or_create_singleton


def get_profile(db: Session) -> Profile | None:
    return db.get(Profile, PROFILE_ID)


def get_or_create_profile(db: Session) -> Profile:
    return get_or_create_singleton(db, Profile, PROFILE_ID, PROFILE_DEFAULTS)


def upsert_profile(db: Session, values: dict) -> Profile:
    """Write ``values`` onto the singleton row, creating it if needed. Caller commits."""
    profile = get_profile(db)
    if profile is None:
        profile = Profile(id=PROFILE_ID, **{**PROFILE_DEFAULTS, **values})
        db.add(profile)
    else:
        for field, value in values.items():
            setattr(profile, field, value)
    return profile
