# portfolio/experience/experience_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from portfolio.auth.security import require_admin
from portfolio.database import get_db
from portfolio.models.experience import Experience
from portfolio.responses import ok
from portfolio.routing import EnvelopeRoute
from portfolio.schemas.experience_schema import (
    ExperienceCreate,
    ExperienceRead,
    ExperienceUpdate,
    timeline_error,
)
from portfolio.store import commit, contains_any, paginate

logger = logging.getLogger("portfolio.experience")

NOT_FOUND = "Experience not found"

router = APIRouter(prefix="/api/experience", tags=["experience"], route_class=EnvelopeRoute)


@router.get("", summary="Fetch experience")
def list_experience(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    current: Optional[bool] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(Experience)
    if current is not None:
        query = query.filter(Experience.current == current)
    if search:
        query = query.filter(
            contains_any(search, Experience.company, Experience.role, Experience.description)
        )

    query = query.order_by(Experience.order.asc(), Experience.start_date.desc())
    items, pagination = paginate(query, page, limit)
    return ok([ExperienceRead.model_validate(e) for e in items], pagination=pagination)


@router.post("", summary="Create experience", dependencies=[Depends(require_admin)])
def create_experience(data: ExperienceCreate, db: Session = Depends(get_db)):
    error = timeline_error(data.start_date, data.end_date, data.current)
    if error:
        raise HTTPException(400, error)

    experience = Experience(**data.model_dump())
    db.add(experience)
    commit(db)
    db.refresh(experience)

    logger.info("experience_created", extra={"experience_id": experience.id})
    return ok(
        ExperienceRead.model_validate(experience),
        message="Experience created successfully",
        status_code=201,
    )


@router.get("/{experience_id}", summary="Fetch experience entry")
def get_experience(experience_id: str, db: Session = Depends(get_db)):
    experience = db.get(Experience, experience_id)
    if not experience:
        raise HTTPException(404, NOT_FOUND)
    return ok(ExperienceRead.model_validate(experience))


@router.put("/{experience_id}", summary="Update experience", dependencies=[Depends(require_admin)])
def update_experience(experience_id: str, data: ExperienceUpdate, db: Session = Depends(get_db)):
    experience = db.get(Experience, experience_id)
    if not experience:
        raise HTTPException(404, NOT_FOUND)

    changes = data.model_dump(exclude_unset=True)

    # validate the merged record, not just the patch
    start_date = changes.get("start_date", experience.start_date)
    end_date = changes["end_date"] if "end_date" in changes else experience.end_date
    current = changes.get("current", experience.current)
    error = timeline_error(start_date, end_date, current)
    if error:
        raise HTTPException(400, error)

    for field, value in changes.items():
        setattr(experience, field, value)

    commit(db)
    db.refresh(experience)
    return ok(ExperienceRead.model_validate(experience), message="Experience updated successfully")


@router.delete("/{experience_id}", summary="Delete experience", dependencies=[Depends(require_admin)])
def delete_experience(experience_id: str, db: Session = Depends(get_db)):
    experience = db.get(Experience, experience_id)
    if not experience:
        raise HTTPException(404, NOT_FOUND)

    db.delete(experience)
    commit(db)
    return ok(message="Experience deleted successfully")
