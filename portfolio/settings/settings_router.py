# portfolio/settings/settings_router.py
"""Site settings: three fields live on the Profile row, the toggles in site_settings."""

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portfolio.auth.security import require_admin
from portfolio.database import get_db
from portfolio.models.site_settings import SETTINGS_ID, SiteSettings
from portfolio.profile.profile_service import get_profile, upsert_profile
from portfolio.responses import ok
from portfolio.routing import EnvelopeRoute
from portfolio.schemas.settings_schema import SettingsRead, SettingsUpdate
from portfolio.store import commit, upsert

logger = logging.getLogger("portfolio.settings")

FALLBACK_TITLE = "Portfolio"
FALLBACK_DESCRIPTION = "A modern portfolio website"
FALLBACK_EMAIL = "contact@example.com"

TOGGLE_FIELDS = ("maintenance_mode", "analytics_enabled", "email_notifications", "theme")

router = APIRouter(prefix="/api/settings", tags=["settings"], route_class=EnvelopeRoute)


def build_settings(profile, toggles) -> SettingsRead:
    return SettingsRead(
        site_title=profile.name if profile else FALLBACK_TITLE,
        site_description=profile.bio if profile else FALLBACK_DESCRIPTION,
        contact_email=profile.email if profile else FALLBACK_EMAIL,
        maintenance_mode=toggles.maintenance_mode if toggles else False,
        analytics_enabled=toggles.analytics_enabled if toggles else True,
        email_notifications=toggles.email_notifications if toggles else True,
        theme=toggles.theme if toggles else "dark",
    )


@router.get("", summary="Fetch settings")
def get_settings(db: Session = Depends(get_db)):
    return ok(build_settings(get_profile(db), db.get(SiteSettings, SETTINGS_ID)))


@router.put("", summary="Update settings", dependencies=[Depends(require_admin)])
def update_settings(data: SettingsUpdate, db: Session = Depends(get_db)):
    profile = upsert_profile(
        db,
        {"name": data.site_title, "bio": data.site_description, "email": data.contact_email},
    )
    toggles = upsert(
        db,
        SiteSettings,
        {"id": SETTINGS_ID},
        {field: getattr(data, field) for field in TOGGLE_FIELDS},
    )
    commit(db)
    db.refresh(profile)
    db.refresh(toggles)

    logger.info("settings_updated", extra={"theme": toggles.theme})
    return ok(build_settings(profile, toggles), message="Settings updated successfully")
