# portfolio/schemas/project_schema.py
from __future__ import annotations

from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, BeforeValidator, Field, model_validator

from portfolio.project.slug import derive_slug
from portfolio.schemas.common import CamelModel, OptionalUrl, Url


def _split_technologies(value):
    # accepts "a, b, c" as well as ["a", "b", "c"]
    if isinstance(value, str):
        value = value.split(",")
    if isinstance(value, (list, tuple)):
        return [item.strip() if isinstance(item, str) else item for item in value]
    return value


def _require_technologies(value: list[str]) -> list[str]:
    value = [item for item in value if item]
    if not value:
        raise ValueError("At least one technology is required")
    return value


Technologies = Annotated[
    list[str], BeforeValidator(_split_technologies), AfterValidator(_require_technologies)
]


def _slugify(value: str) -> str:
    slug = derive_slug(value)[:100].strip("-")
    if not slug:
        raise ValueError("Slug must contain letters or digits")
    return slug


# explicit slugs go through the same normalisation as derived ones
Slug = Annotated[str, Field(min_length=1, max_length=100), AfterValidator(_slugify)]


# --------- For creating a project (POST) ---------
class ProjectCreate(CamelModel):
    title: str = Field(min_length=1, max_length=100)
    slug: Optional[Slug] = None
    description: str = Field(min_length=1, max_length=1000)
    image_url: Url
    link: OptionalUrl = None
    github_url: OptionalUrl = None
    technologies: Technologies
    featured: bool = False

    @model_validator(mode="after")
    def fill_slug(self):
        if self.slug is None:
            slug = derive_slug(self.title)[:100].strip("-")
            if not slug:
                raise ValueError("Slug could not be derived from title")
            self.slug = slug
        return self


# --------- For updating a project (PUT) ---------
# omitted fields stay unchanged; explicit null is only allowed on nullable columns
class ProjectUpdate(CamelModel):
    title: str = Field(None, min_length=1, max_length=100)
    slug: Slug = None
    description: str = Field(None, min_length=1, max_length=1000)
    image_url: Url = None
    link: OptionalUrl = None
    github_url: OptionalUrl = None
    technologies: Technologies = None
    featured: bool = None


# --------- For reading a project (GET responses) ---------
class ProjectRead(CamelModel):
    id: str
    title: str
    slug: str
    description: str
    image_url: str
    link: Optional[str] = None
    github_url: Optional[str] = None
    technologies: list[str]
    featured: bool
    created_at: datetime
    updated_at: datetime
