# portfolio/scripts/seed.py
"""Idempotent demo content: python -m portfolio.scripts.seed"""

from datetime import datetime, timezone
import logging

from sqlalchemy.orm import Session

from portfolio.config import PROFILE_DEFAULTS
from portfolio.database import SessionLocal
from portfolio.models.experience import Experience
from portfolio.models.project import Project
from portfolio.models.registry import create_all
from portfolio.models.skill import Skill
from portfolio.profile.profile_service import upsert_profile
from portfolio.store import commit, upsert

logger = logging.getLogger("portfolio.seed")

PROJECTS = [
    {
        "title": "E-Commerce Platform",
        "slug": "ecommerce-platform",
        "description": "A full-stack e-commerce platform with a Python API and a React storefront",
        "image_url": "https://images.unsplash.com/photo-1556742049-0cfed4f6a45d",
        "link": "https://ecommerce-demo.com",
        "github_url": "https://github.com/user/ecommerce",
        "technologies": ["Next.js", "TypeScript", "PostgreSQL", "FastAPI"],
        "featured": True,
    },
    {
        "title": "Task Management App",
        "slug": "task-management-app",
        "description": "A collaborative task management application with real-time updates",
        "image_url": "https://images.unsplash.com/photo-1611224923853-80b023f02d71",
        "link": "https://taskapp-demo.com",
        "github_url": "https://github.com/user/taskapp",
        "technologies": ["React", "Node.js", "Socket.io", "MongoDB"],
        "featured": False,
    },
]

SKILLS = [
    {"name": "JavaScript", "category": "Frontend", "level": 5, "order": 1},
    {"name": "TypeScript", "category": "Frontend", "level": 5, "order": 2},
    {"name": "React", "category": "Frontend", "level": 5, "order": 3},
    {"name": "Next.js", "category": "Frontend", "level": 4, "order": 4},
    {"name": "Node.js", "category": "Backend", "level": 4, "order": 5},
    {"name": "PostgreSQL", "category": "Database", "level": 4, "order": 6},
    {"name": "SQLAlchemy", "category": "Database", "level": 4, "order": 7},
]

EXPERIENCES = [
    {
        "company": "Tech Corp",
        "role": "Senior Full Stack Developer",
        "start_date": datetime(2022, 1, 1, tzinfo=timezone.utc),
        "end_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "description": "Led development of multiple web applications using React and Node.js",
        "current": False,
        "order": 1,
    },
    {
        "company": "StartupXYZ",
        "role": "Lead Developer",
        "start_date": datetime(2024, 1, 1, tzinfo=timezone.utc),
        "end_date": None,
        "description": "Building scalable web applications and mentoring junior developers",
        "current": True,
        "order": 2,
    },
]


def seed(db: Session) -> dict:
    upsert_profile(db, dict(PROFILE_DEFAULTS))

    for skill in SKILLS:
        key = {"name": skill["name"], "category": skill["category"]}
        upsert(db, Skill, key, {k: v for k, v in skill.items() if k not in key})

    for project in PROJECTS:
        upsert(db, Project, {"slug": project["slug"]}, {k: v for k, v in project.items() if k != "slug"})

    # experiences have no natural key, so they are recreated
    db.query(Experience).delete()
    for experience in EXPERIENCES:
        db.add(Experience(**experience))

    commit(db)
    return {
        "projects": db.query(Project).count(),
        "skills": db.query(Skill).count(),
        "experiences": db.query(Experience).count(),
    }


def main() -> None:
    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s %(message)s")
    create_all()
    db = SessionLocal()
    try:
        counts = seed(db)
    except Exception:
        logger.exception("seed_failed")
        raise
    finally:
        db.close()
    print(f"Seed data created successfully! {counts}")


if __name__ == "__main__":
    main()
