# portfolio/schemas/common.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Optional

from pydantic import (
    AfterValidator,
    AnyHttpUrl,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    TypeAdapter,
    ValidationError,
)
from pydantic.alias_generators import to_camel

_http_url = TypeAdapter(AnyHttpUrl)


class CamelModel(BaseModel):
    """camelCase on the wire, snake_case in Python."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class Pagination(CamelModel):
    page: int
    limit: int
    total: int
    total_pages: int
    has_next: bool
    has_prev: bool


# --------- field helpers ---------
def _is_http_url(value: str) -> bool:
    try:
        _http_url.validate_python(value)
    except ValidationError:
        return False
    return True


def _blank_to_none(value):
    if isinstance(value, str) and value.strip() == "":
        return None
    return value


def _check_url(value: str) -> str:
    if not _is_http_url(value):
        raise ValueError("Must be a valid URL")
    return value


def _check_optional_url(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    return _check_url(value)


def _check_url_or_path(value: Optional[str]) -> Optional[str]:
    if value is None or value.startswith("/"):
        return value
    if not _is_http_url(value):
        raise ValueError("Must be a valid URL or relative path")
    return value


def _to_utc(value: Optional[datetime]) -> Optional[datetime]:
    if value is None:
        return None
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


# valid absolute URL, stored verbatim
Url = Annotated[str, AfterValidator(_check_url)]
# valid absolute URL or "" (normalized to None)
OptionalUrl = Annotated[
    Optional[str], BeforeValidator(_blank_to_none), AfterValidator(_check_optional_url)
]
# valid absolute URL, site-relative path, or "" (normalized to None)
UrlOrPath = Annotated[
    Optional[str], BeforeValidator(_blank_to_none), AfterValidator(_check_url_or_path)
]
UtcDateTime = Annotated[datetime, AfterValidator(_to_utc)]
OptionalUtcDateTime = Annotated[
    Optional[datetime], BeforeValidator(_blank_to_none), AfterValidator(_to_utc)
]
OptionalText = Annotated[Optional[str], BeforeValidator(_blank_to_none)]
