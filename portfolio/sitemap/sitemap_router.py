# portfolio/sitemap/sitemap_router.py

from datetime import datetime, timezone
import logging
from xml.etree import ElementTree as ET

from fastapi import APIRouter, Depends
from fastapi.responses import Response
from sqlalchemy.orm import Session

from portfolio.config import SITE_URL
from portfolio.database import get_db
from portfolio.models.project import Project

logger = logging.getLogger("portfolio.sitemap")

SITEMAP_NS = "http://www.sitemaps.org/schemas/sitemap/0.9"
CACHE_CONTROL = "public, max-age=3600"

# (path, changefreq, priority)
STATIC_PAGES = [
    ("", "weekly", "1.0"),
    ("/admin", "monthly", "0.3"),
]
PROJECT_CHANGEFREQ = "monthly"
PROJECT_PRIORITY = "0.8"

router = APIRouter(tags=["sitemap"])


def _isoformat(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")


def render_sitemap(base_url: str, projects, now: datetime) -> bytes:
    urlset = ET.Element("urlset", xmlns=SITEMAP_NS)

    def add(loc: str, lastmod: datetime, changefreq: str, priority: str) -> None:
        url = ET.SubElement(urlset, "url")
        ET.SubElement(url, "loc").text = loc
        ET.SubElement(url, "lastmod").text = _isoformat(lastmod)
        ET.SubElement(url, "changefreq").text = changefreq
        ET.SubElement(url, "priority").text = priority

    for path, changefreq, priority in STATIC_PAGES:
        add(f"{base_url}{path}", now, changefreq, priority)
    for slug, updated_at in projects:
        add(f"{base_url}/projects/{slug}", updated_at, PROJECT_CHANGEFREQ, PROJECT_PRIORITY)

    ET.indent(urlset)
    return ET.tostring(urlset, encoding="UTF-8", xml_declaration=True)


@router.get("/sitemap.xml", include_in_schema=False)
def get_sitemap(db: Session = Depends(get_db)):
    try:
        projects = (
            db.query(Project.slug, Project.updated_at)
            .order_by(Project.updated_at.desc())
            .all()
        )
        body = render_sitemap(SITE_URL, projects, datetime.now(timezone.utc))
    except Exception:
        logger.exception("sitemap_failed")
        return Response("Error generating sitemap", status_code=500, media_type="text/plain")

    return Response(
        content=body,
        media_type="application/xml",
        headers={"Cache-Control": CACHE_CONTROL},
    )
