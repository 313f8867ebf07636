# portfolio/models/image.py
from __future__ import annotations

from sqlalchemy import Column, Integer, String

from portfolio.database import Base, UTCDateTime, new_id, utcnow


class Image(Base):
    """Local mirror of an object stored in the image CDN."""

    __tablename__ = "images"

    id = Column(String(36), primary_key=True, default=new_id)

    public_id = Column(String(255), unique=True, index=True, nullable=False)
    secure_url = Column(String(500), nullable=False)
    width = Column(Integer, nullable=True)
    height = Column(Integer, nullable=True)
    format = Column(String(20), nullable=True)
    bytes = Column(Integer, nullable=True)
    folder = Column(String(255), nullable=False, index=True, default="portfolio")

    created_at = Column(UTCDateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
