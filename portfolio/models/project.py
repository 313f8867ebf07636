# portfolio/models/project.py
from __future__ import annotations

from sqlalchemy import Boolean, Column, JSON, String, Text
from sqlalchemy.orm import validates

from portfolio.database import Base, UTCDateTime, new_id, utcnow


class Project(Base):
    __tablename__ = "projects"

    id = Column(String(36), primary_key=True, default=new_id)

    title = Column(String(100), nullable=False)
    slug = Column(String(100), unique=True, index=True, nullable=False)
    description = Column(Text, nullable=False)

    image_url = Column(String(500), nullable=False)
    link = Column(String(500), nullable=True)
    github_url = Column(String(500), nullable=True)

    # ordered list of technology names
    technologies = Column(JSON, nullable=False, default=list)
    # lowercased names, one per line; the search target for technologies
    technologies_text = Column(Text, nullable=False, default="")
    featured = Column(Boolean, default=False, nullable=False)

    created_at = Column(UTCDateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)

    @validates("technologies")
    def _index_technologies(self, key, value):
        self.technologies_text = "\n".join(str(name).lower() for name in value or ())
        return value
