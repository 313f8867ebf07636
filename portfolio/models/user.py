# portfolio/models/user.py
from __future__ import annotations

from sqlalchemy import Column, String

from portfolio.database import Base, UTCDateTime, new_id, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=new_id)
    email = Column(String(255), unique=True, index=True, nullable=False)
    # bcrypt hash, never plaintext
    password = Column(String(255), nullable=False)

    created_at = Column(UTCDateTime, default=utcnow, nullable=False)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
