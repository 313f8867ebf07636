# portfolio/profile/profile_router.py

import logging

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from portfolio.auth.security import require_admin
from portfolio.database import get_db
from portfolio.profile.profile_service import get_or_create_profile, upsert_profile
from portfolio.responses import ok
from portfolio.routing import EnvelopeRoute
from portfolio.schemas.profile_schema import ProfileRead, ProfileUpdate
from portfolio.store import commit

logger = logging.getLogger("portfolio.profile")

router = APIRouter(prefix="/api/profile", tags=["profile"], route_class=EnvelopeRoute)


@router.get("", summary="Fetch profile")
def get_profile(db: Session = Depends(get_db)):
    profile = get_or_create_profile(db)
    return ok(ProfileRead.model_validate(profile))


@router.put("", summary="Update profile", dependencies=[Depends(require_admin)])
def update_profile(data: ProfileUpdate, db: Session = Depends(get_db)):
    profile = upsert_profile(db, data.model_dump())
    commit(db)
    db.refresh(profile)

    logger.info("profile_updated")
    return ok(ProfileRead.model_validate(profile), message="Profile updated successfully")
