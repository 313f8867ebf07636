from datetime import datetime, timezone
from xml.etree import ElementTree as ET

import pytest

from portfolio.analytics.analytics_router import percentage
from portfolio.analytics.duration import format_duration
from portfolio.sitemap.sitemap_router import SITEMAP_NS


def utc(*args):
    return datetime(*args, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    "start,end,expected",
    [
        (utc(2022, 1, 1), utc(2024, 4, 1), "2 years 3 months"),
        (utc(2023, 1, 15), utc(2024, 1, 15), "1 year 0 months"),
        (utc(2024, 1, 1), utc(2024, 6, 1), "5 months"),
        (utc(2024, 1, 1), utc(2024, 2, 1), "1 month"),
        (utc(2024, 1, 1), utc(2024, 1, 13), "12 days"),
        (utc(2024, 1, 1), utc(2024, 1, 2), "1 day"),
        (utc(2024, 1, 31), utc(2024, 2, 29), "29 days"),
    ],
)
def test_format_duration(start, end, expected):
    assert format_duration(start, end) == expected


def test_format_duration_open_ended_uses_now():
    assert format_duration(utc(2024, 1, 1), now=utc(2025, 3, 10)) == "1 year 2 months"


def test_percentage_rounds_half_up():
    assert percentage(2, 3) == 67
    assert percentage(1, 3) == 33
    assert percentage(1, 8) == 13
    assert percentage(0, 0) == 0


def test_analytics_summary(client, admin_headers, project_payload, experience_payload):
    client.post("/api/projects", json=project_payload(title="Alpha", featured=True), headers=admin_headers)
    client.post("/api/projects", json=project_payload(title="Beta"), headers=admin_headers)
    for name, category in [("React", "Frontend"), ("Vue", "Frontend"), ("Go", "Backend")]:
        client.post("/api/skills", json={"name": name, "category": category, "level": 3}, headers=admin_headers)
    client.post(
        "/api/experience",
        json=experience_payload(startDate="2022-01-01T00:00:00Z", endDate="2024-04-01T00:00:00Z"),
        headers=admin_headers,
    )
    client.post(
        "/api/contact",
        json={"name": "Ada", "email": "ada@example.com", "message": "Hello there, nice site!"},
    )

    response = client.get("/api/analytics", headers=admin_headers)

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["contentStats"] == {
        "totalProjects": 2,
        "totalSkills": 3,
        "totalExperience": 1,
        "totalContacts": 1,
        "featuredProjects": 1,
    }
    assert [p["title"] for p in data["featuredProjects"]] == ["Alpha"]
    assert data["skillDistribution"] == [
        {"category": "Backend", "count": 1, "percentage": 33},
        {"category": "Frontend", "count": 2, "percentage": 67},
    ]
    assert data["contactAnalytics"] == {"totalContacts": 1, "recentContacts": 1, "unreadContacts": 1}
    assert data["experienceTimeline"][0]["duration"] == "2 years 3 months"
    assert len(data["projects"]) == 2


def test_analytics_on_empty_database(client, admin_headers):
    data = client.get("/api/analytics", headers=admin_headers).json()["data"]

    assert data["contentStats"]["totalProjects"] == 0
    assert data["skillDistribution"] == []
    assert data["experienceTimeline"] == []


def test_analytics_is_admin_only(client):
    assert client.get("/api/analytics").status_code == 401


def test_sitemap(client, admin_headers, project_payload):
    client.post("/api/projects", json=project_payload(title="My App"), headers=admin_headers)

    response = client.get("/sitemap.xml")

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/xml")
    assert response.headers["cache-control"] == "public, max-age=3600"

    root = ET.fromstring(response.content)
    ns = {"sm": SITEMAP_NS}
    urls = root.findall("sm:url", ns)
    assert [u.find("sm:loc", ns).text for u in urls] == [
        "https://portfolio.test",
        "https://portfolio.test/admin",
        "https://portfolio.test/projects/my-app",
    ]
    assert [u.find("sm:priority", ns).text for u in urls] == ["1.0", "0.3", "0.8"]
    assert [u.find("sm:changefreq", ns).text for u in urls] == ["weekly", "monthly", "monthly"]
