# portfolio/skill/skill_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session

from portfolio.auth.security import require_admin
from portfolio.database import get_db
from portfolio.models.skill import Skill
from portfolio.responses import ok
from portfolio.routing import EnvelopeRoute
from portfolio.schemas.skill_schema import SkillCreate, SkillRead, SkillUpdate
from portfolio.store import commit, contains_any, paginate

logger = logging.getLogger("portfolio.skill")

DUPLICATE_SKILL = "Skill with this name and category already exists"
NOT_FOUND = "Skill not found"

router = APIRouter(prefix="/api/skills", tags=["skills"], route_class=EnvelopeRoute)


def _duplicate_exists(db: Session, name: str, category: str, exclude_id: Optional[str] = None) -> bool:
    query = db.query(Skill.id).filter(Skill.name == name, Skill.category == category)
    if exclude_id is not None:
        query = query.filter(Skill.id != exclude_id)
    return query.first() is not None


@router.get("", summary="Fetch skills")
def list_skills(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    category: Optional[str] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(Skill)
    if category:
        query = query.filter(Skill.category == category)
    if search:
        query = query.filter(contains_any(search, Skill.name))

    items, pagination = paginate(query.order_by(Skill.order.asc(), Skill.name.asc()), page, limit)
    return ok([SkillRead.model_validate(s) for s in items], pagination=pagination)


@router.post("", summary="Create skill", dependencies=[Depends(require_admin)])
def create_skill(data: SkillCreate, db: Session = Depends(get_db)):
    if _duplicate_exists(db, data.name, data.category):
        raise HTTPException(400, DUPLICATE_SKILL)

    skill = Skill(**data.model_dump())
    db.add(skill)
    commit(db, DUPLICATE_SKILL)
    db.refresh(skill)

    logger.info("skill_created", extra={"skill_id": skill.id})
    return ok(SkillRead.model_validate(skill), message="Skill created successfully", status_code=201)


@router.get("/{skill_id}", summary="Fetch skill")
def get_skill(skill_id: str, db: Session = Depends(get_db)):
    skill = db.get(Skill, skill_id)
    if not skill:
        raise HTTPException(404, NOT_FOUND)
    return ok(SkillRead.model_validate(skill))


@router.put("/{skill_id}", summary="Update skill", dependencies=[Depends(require_admin)])
def update_skill(skill_id: str, data: SkillUpdate, db: Session = Depends(get_db)):
    skill = db.get(Skill, skill_id)
    if not skill:
        raise HTTPException(404, NOT_FOUND)

    changes = data.model_dump(exclude_unset=True)
    if "name" in changes or "category" in changes:
        name = changes.get("name", skill.name)
        category = changes.get("category", skill.category)
        if _duplicate_exists(db, name, category, exclude_id=skill.id):
            raise HTTPException(400, DUPLICATE_SKILL)

    for field, value in changes.items():
        setattr(skill, field, value)

    commit(db, DUPLICATE_SKILL)
    db.refresh(skill)
    return ok(SkillRead.model_validate(skill), message="Skill updated successfully")


@router.delete("/{skill_id}", summary="Delete skill", dependencies=[Depends(require_admin)])
def delete_skill(skill_id: str, db: Session = Depends(get_db)):
    skill = db.get(Skill, skill_id)
    if not skill:
        raise HTTPException(404, NOT_FOUND)

    db.delete(skill)
    commit(db)
    return ok(message="Skill deleted successfully")
