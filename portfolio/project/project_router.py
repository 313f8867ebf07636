# portfolio/project/project_router.py

import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import or_
from sqlalchemy.orm import Session

from portfolio.auth.security import require_admin
from portfolio.database import get_db
from portfolio.models.project import Project
from portfolio.project.slug import derive_slug
from portfolio.responses import ok
from portfolio.routing import EnvelopeRoute
from portfolio.schemas.project_schema import ProjectCreate, ProjectRead, ProjectUpdate
from portfolio.store import LIKE_ESCAPE, commit, contains_any, like_pattern, paginate

logger = logging.getLogger("portfolio.project")

DUPLICATE_SLUG = "Project with this slug already exists"
NOT_FOUND = "Project not found"

router = APIRouter(prefix="/api/projects", tags=["projects"], route_class=EnvelopeRoute)


def _slug_taken(db: Session, slug: str, exclude_id: Optional[str] = None) -> bool:
    query = db.query(Project.id).filter(Project.slug == slug)
    if exclude_id is not None:
        query = query.filter(Project.id != exclude_id)
    return query.first() is not None


# ==========================
#  LIST PROJECTS
# ==========================
@router.get("", summary="Fetch projects")
def list_projects(
    page: int = Query(1, ge=1),
    limit: int = Query(10, ge=1),
    featured: Optional[bool] = None,
    search: Optional[str] = None,
    db: Session = Depends(get_db),
):
    query = db.query(Project)
    if featured is not None:
        query = query.filter(Project.featured == featured)
    if search:
        query = query.filter(
            or_(
                contains_any(search, Project.title, Project.description),
                # stored lowercased, so non-ASCII names fold too
                Project.technologies_text.like(like_pattern(search.lower()), escape=LIKE_ESCAPE),
            )
        )

    items, pagination = paginate(query.order_by(Project.created_at.desc()), page, limit)
    return ok([ProjectRead.model_validate(p) for p in items], pagination=pagination)


# ==========================
#  CREATE PROJECT
# ==========================
@router.post("", summary="Create project", dependencies=[Depends(require_admin)])
def create_project(data: ProjectCreate, db: Session = Depends(get_db)):
    if _slug_taken(db, data.slug):
        raise HTTPException(400, DUPLICATE_SLUG)

    project = Project(**data.model_dump())
    db.add(project)
    commit(db, DUPLICATE_SLUG)
    db.refresh(project)

    logger.info("project_created", extra={"project_id": project.id, "slug": project.slug})
    return ok(ProjectRead.model_validate(project), message="Project created successfully", status_code=201)


# ==========================
#  GET PROJECT BY ID
# ==========================
@router.get("/{project_id}", summary="Fetch project")
def get_project(project_id: str, db: Session = Depends(get_db)):
    project = db.get(Project, project_id)
    if not project:
        raise HTTPException(404, NOT_FOUND)
    return ok(ProjectRead.model_validate(project))


# ==========================
#  UPDATE PROJECT (PUT, partial)
# ==========================
@router.put("/{project_id}", summary="Update project", dependencies=[Depends(require_admin)])
def update_project(project_id: str, data: ProjectUpdate, db: Session = Depends(get_db)):
    project = db.get(Project, project_id)
    if not project:
        raise HTTPException(404, NOT_FOUND)

    changes = data.model_dump(exclude_unset=True)

    # a new title always regenerates the slug
    if "title" in changes and changes["title"] != project.title:
        changes["slug"] = derive_slug(changes["title"])[:100].strip("-")
        if not changes["slug"]:
            raise HTTPException(400, "Slug could not be derived from title")

    if "slug" in changes and changes["slug"] != project.slug:
        if _slug_taken(db, changes["slug"], exclude_id=project.id):
            raise HTTPException(400, DUPLICATE_SLUG)

    for field, value in changes.items():
        setattr(project, field, value)

    commit(db, DUPLICATE_SLUG)
    db.refresh(project)
    return ok(ProjectRead.model_validate(project), message="Project updated successfully")


# ==========================
#  DELETE PROJECT
# ==========================
@router.delete("/{project_id}", summary="Delete project", dependencies=[Depends(require_admin)])
def delete_project(project_id: str, db: Session = Depends(get_db)):
    project = db.get(Project, project_id)
    if not project:
        raise HTTPException(status_code=404, detail=NOT_FOUND)

    db.delete(project)
    commit(db)
    logger.info("project_deleted", extra={"project_id": project_id})
    return ok(message="Project deleted successfully")
