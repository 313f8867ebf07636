# portfolio/models/skill.py
from __future__ import annotations

from sqlalchemy import Column, Integer, String, UniqueConstraint

from portfolio.database import Base, UTCDateTime, new_id, utcnow


class Skill(Base):
    __tablename__ = "skills"
    __table_args__ = (UniqueConstraint("name", "category", name="uq_skill_name_category"),)

    id = Column(String(36), primary_key=True, default=new_id)

    name = Column(String(50), nullable=False, index=True)
    category = Column(String(50), nullable=False, index=True)
    level = Column(Integer, nullable=False)
    icon_url = Column(String(500), nullable=True)
    order = Column(Integer, default=0, nullable=False)

    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
