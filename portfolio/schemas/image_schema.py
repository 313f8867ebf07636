# portfolio/schemas/image_schema.py
from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, ConfigDict

# image payloads keep the CDN's snake_case keys on the wire


class ImageUpload(BaseModel):
    public_id: str
    secure_url: str
    width: Optional[int] = None
    height: Optional[int] = None
    format: Optional[str] = None
    bytes: Optional[int] = None


class ImageRead(ImageUpload):
    model_config = ConfigDict(from_attributes=True)

    created_at: datetime
    folder: str


class ReconcileReport(BaseModel):
    folder: str
    created: int = 0
    updated: int = 0
    deleted: int = 0
