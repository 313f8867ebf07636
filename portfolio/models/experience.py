# portfolio/models/experience.py
from __future__ import annotations

from sqlalchemy import Boolean, Column, Integer, String, Text

from portfolio.database import Base, UTCDateTime, new_id, utcnow


class Experience(Base):
    __tablename__ = "experiences"

    id = Column(String(36), primary_key=True, default=new_id)

    company = Column(String(100), nullable=False)
    role = Column(String(100), nullable=False)
    description = Column(Text, nullable=False)

    start_date = Column(UTCDateTime, nullable=False)
    # NULL while the position is current
    end_date = Column(UTCDateTime, nullable=True)
    current = Column(Boolean, default=False, nullable=False)

    order = Column(Integer, default=0, nullable=False)

    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
