# portfolio/analytics/analytics_router.py

import logging
import math

from fastapi import APIRouter, Depends
from sqlalchemy import func
from sqlalchemy.orm import Session

from portfolio.analytics.duration import format_duration
from portfolio.auth.security import require_admin
from portfolio.database import get_db
from portfolio.models.contact import Contact
from portfolio.models.experience import Experience
from portfolio.models.project import Project
from portfolio.models.skill import Skill
from portfolio.responses import ok
from portfolio.routing import EnvelopeRoute

logger = logging.getLogger("portfolio.analytics")

RECENT_CONTACTS = 30
FEATURED_LIMIT = 5

router = APIRouter(
    prefix="/api/analytics",
    tags=["analytics"],
    route_class=EnvelopeRoute,
    dependencies=[Depends(require_admin)],
)


def percentage(part: int, total: int) -> int:
    # half-up rounding; the parts may sum to 100 +/- 1
    if not total:
        return 0
    return math.floor(part * 100 / total + 0.5)


def build_analytics(db: Session) -> dict:
    # independent reads, no ordering between them
    projects_count = db.query(func.count(Project.id)).scalar() or 0
    skills_count = db.query(func.count(Skill.id)).scalar() or 0
    experience_count = db.query(func.count(Experience.id)).scalar() or 0
    contacts_count = db.query(func.count(Contact.id)).scalar() or 0

    featured = (
        db.query(Project.id, Project.title)
        .filter(Project.featured.is_(True))
        .order_by(Project.created_at.asc())
        .limit(FEATURED_LIMIT)
        .all()
    )
    featured_count = db.query(func.count(Project.id)).filter(Project.featured.is_(True)).scalar() or 0

    projects = (
        db.query(Project.id, Project.title, Project.featured, Project.created_at)
        .order_by(Project.created_at.desc())
        .all()
    )

    by_category = (
        db.query(Skill.category, func.count(Skill.id))
        .group_by(Skill.category)
        .order_by(Skill.category.asc())
        .all()
    )

    recent = (
        db.query(Contact.created_at, Contact.read)
        .order_by(Contact.created_at.desc())
        .limit(RECENT_CONTACTS)
        .all()
    )

    experiences = db.query(Experience).order_by(Experience.start_date.desc()).all()

    return {
        "contentStats": {
            "totalProjects": projects_count,
            "totalSkills": skills_count,
            "totalExperience": experience_count,
            "totalContacts": contacts_count,
            "featuredProjects": featured_count,
        },
        "featuredProjects": [{"id": p.id, "title": p.title} for p in featured],
        "skillDistribution": [
            {"category": category, "count": count, "percentage": percentage(count, skills_count)}
            for category, count in by_category
        ],
        "contactAnalytics": {
            "totalContacts": contacts_count,
            "recentContacts": len(recent),
            "unreadContacts": sum(1 for c in recent if not c.read),
        },
        "experienceTimeline": [
            {
                "id": e.id,
                "company": e.company,
                "role": e.role,
                "startDate": e.start_date,
                "endDate": e.end_date,
                "current": e.current,
                "duration": format_duration(e.start_date, None if e.current else e.end_date),
            }
            for e in experiences
        ],
        "projects": [
            {"id": p.id, "title": p.title, "featured": p.featured, "createdAt": p.created_at}
            for p in projects
        ],
    }


@router.get("", summary="Fetch analytics")
def get_analytics(db: Session = Depends(get_db)):
    return ok(build_analytics(db))
