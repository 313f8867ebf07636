# portfolio/models/contact.py
from __future__ import annotations

from sqlalchemy import Boolean, Column, String, Text

from portfolio.database import Base, UTCDateTime, new_id, utcnow


class Contact(Base):
    __tablename__ = "contacts"

    id = Column(String(36), primary_key=True, default=new_id)

    name = Column(String(100), nullable=False)
    email = Column(String(200), nullable=False)
    message = Column(Text, nullable=False)

    # the only mutable column
    read = Column(Boolean, default=False, nullable=False, index=True)

    created_at = Column(UTCDateTime, default=utcnow, nullable=False, index=True)
    updated_at = Column(UTCDateTime, default=utcnow, onupdate=utcnow, nullable=False)
