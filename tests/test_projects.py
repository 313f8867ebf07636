import math

from portfolio.models.project import Project
from portfolio.project import project_router
from portfolio.project.slug import derive_slug


def test_derive_slug():
    assert derive_slug("My App") == "my-app"
    assert derive_slug("  Hello, World!!  ") == "hello-world"
    assert derive_slug("Next.js + FastAPI") == "next-js-fastapi"
    assert derive_slug("---") == ""


def test_create_project_derives_slug_and_rejects_duplicate(client, admin_headers, project_payload):
    response = client.post("/api/projects", json=project_payload(), headers=admin_headers)

    assert response.status_code == 201
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Project created successfully"
    assert body["data"]["slug"] == "my-app"
    assert body["data"]["featured"] is False

    again = client.post("/api/projects", json=project_payload(), headers=admin_headers)
    assert again.status_code == 400
    assert again.json() == {"success": False, "error": "Project with this slug already exists"}


def test_create_then_get_round_trip(client, admin_headers, project_payload):
    payload = project_payload(
        link="https://demo.example/app",
        githubUrl="https://github.com/someone/app",
        featured=True,
    )
    created = client.post("/api/projects", json=payload, headers=admin_headers).json()["data"]

    fetched = client.get(f"/api/projects/{created['id']}").json()["data"]
    for field in ("title", "description", "imageUrl", "link", "githubUrl", "technologies", "featured"):
        assert fetched[field] == payload[field]
    assert fetched["slug"] == "my-app"


def test_technologies_accepts_comma_separated_string(client, admin_headers, project_payload):
    response = client.post(
        "/api/projects",
        json=project_payload(technologies="React, FastAPI , ,PostgreSQL"),
        headers=admin_headers,
    )
    assert response.status_code == 201
    assert response.json()["data"]["technologies"] == ["React", "FastAPI", "PostgreSQL"]


def test_empty_optional_urls_become_null(client, admin_headers, project_payload):
    response = client.post(
        "/api/projects", json=project_payload(link="", githubUrl=""), headers=admin_headers
    )
    data = response.json()["data"]
    assert data["link"] is None
    assert data["githubUrl"] is None


def test_validation_errors_use_envelope(client, admin_headers, project_payload):
    payload = project_payload(title="", technologies=[])
    payload.pop("imageUrl")

    response = client.post("/api/projects", json=payload, headers=admin_headers)

    assert response.status_code == 400
    body = response.json()
    assert body["success"] is False
    assert body["error"] == "Validation error"
    paths = [issue["path"] for issue in body["details"]]
    assert ["title"] in paths
    assert ["imageUrl"] in paths
    assert ["technologies"] in paths
    assert all("message" in issue for issue in body["details"])


def test_invalid_image_url_rejected(client, admin_headers, project_payload):
    response = client.post(
        "/api/projects", json=project_payload(imageUrl="not a url"), headers=admin_headers
    )
    assert response.status_code == 400
    assert response.json()["details"][0]["message"] == "Must be a valid URL"


def test_pagination_contract(client, admin_headers, project_payload):
    for i in range(12):
        client.post("/api/projects", json=project_payload(title=f"Project {i}"), headers=admin_headers)

    for page, expected in ((1, 5), (2, 5), (3, 2)):
        body = client.get(f"/api/projects?page={page}&limit=5").json()
        pagination = body["pagination"]
        assert len(body["data"]) == expected
        assert pagination["total"] == 12
        assert pagination["totalPages"] == math.ceil(12 / 5)
        assert pagination["hasNext"] == (page < 3)
        assert pagination["hasPrev"] == (page > 1)


def test_pagination_rejects_bad_page(client):
    response = client.get("/api/projects?page=0")
    assert response.status_code == 400
    assert response.json()["details"][0]["path"] == ["page"]


def test_list_filters_and_search(client, admin_headers, project_payload):
    client.post(
        "/api/projects",
        json=project_payload(title="Shop", technologies=["FastAPI"], featured=True),
        headers=admin_headers,
    )
    client.post(
        "/api/projects",
        json=project_payload(title="Blog", description="Static blog engine", technologies=["Go"]),
        headers=admin_headers,
    )

    featured = client.get("/api/projects?featured=true").json()["data"]
    assert [p["title"] for p in featured] == ["Shop"]

    by_tech = client.get("/api/projects?search=fastapi").json()["data"]
    assert [p["title"] for p in by_tech] == ["Shop"]

    by_description = client.get("/api/projects?search=STATIC").json()["data"]
    assert [p["title"] for p in by_description] == ["Blog"]


def test_update_title_regenerates_slug(client, admin_headers, project_payload):
    created = client.post("/api/projects", json=project_payload(), headers=admin_headers).json()["data"]

    response = client.put(
        f"/api/projects/{created['id']}", json={"title": "Brand New Name"}, headers=admin_headers
    )

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["slug"] == "brand-new-name"
    assert data["description"] == created["description"]


def test_update_title_to_existing_slug_rejected(client, admin_headers, project_payload):
    client.post("/api/projects", json=project_payload(title="Taken"), headers=admin_headers)
    other = client.post("/api/projects", json=project_payload(title="Other"), headers=admin_headers).json()["data"]

    response = client.put(f"/api/projects/{other['id']}", json={"title": "TAKEN"}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Project with this slug already exists"


def test_update_keeps_own_slug(client, admin_headers, project_payload):
    created = client.post("/api/projects", json=project_payload(), headers=admin_headers).json()["data"]

    response = client.put(
        f"/api/projects/{created['id']}",
        json={"title": "My App", "featured": True},
        headers=admin_headers,
    )

    assert response.status_code == 200
    assert response.json()["data"]["slug"] == "my-app"
    assert response.json()["data"]["featured"] is True


def test_update_rejects_null_for_required_field(client, admin_headers, project_payload):
    created = client.post("/api/projects", json=project_payload(), headers=admin_headers).json()["data"]

    response = client.put(f"/api/projects/{created['id']}", json={"title": None}, headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["error"] == "Validation error"


def test_get_update_delete_missing_project(client, admin_headers):
    assert client.get("/api/projects/nope").status_code == 404
    assert client.put("/api/projects/nope", json={}, headers=admin_headers).status_code == 404
    response = client.delete("/api/projects/nope", headers=admin_headers)
    assert response.status_code == 404
    assert response.json() == {"success": False, "error": "Project not found"}


def test_delete_project(client, admin_headers, project_payload, db_session):
    created = client.post("/api/projects", json=project_payload(), headers=admin_headers).json()["data"]

    response = client.delete(f"/api/projects/{created['id']}", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["message"] == "Project deleted successfully"
    assert db_session.query(Project).count() == 0


def test_mutations_require_session(client, admin_headers, project_payload, db_session):
    created = client.post("/api/projects", json=project_payload(), headers=admin_headers).json()["data"]

    responses = [
        client.post("/api/projects", json=project_payload(title="Sneaky")),
        client.put(f"/api/projects/{created['id']}", json={"title": "Hacked"}),
        client.delete(f"/api/projects/{created['id']}"),
        client.post("/api/projects", json=project_payload(title="Forged"), headers={"Authorization": "Bearer junk"}),
    ]

    for response in responses:
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized"}

    titles = [p.title for p in db_session.query(Project).all()]
    assert titles == ["My App"]


def test_unexpected_error_is_enveloped(client, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("database on fire")

    monkeypatch.setattr(project_router, "paginate", boom)

    response = client.get("/api/projects")

    assert response.status_code == 500
    assert response.json() == {"success": False, "error": "Failed to fetch projects"}


def test_search_matches_technology_names_not_json(client, admin_headers, project_payload):
    client.post("/api/projects", json=project_payload(title="One", technologies=["Go"]), headers=admin_headers)
    client.post("/api/projects", json=project_payload(title="Two", technologies=["Café"]), headers=admin_headers)

    def search(term):
        response = client.get("/api/projects", params={"search": term})
        return [p["title"] for p in response.json()["data"]]

    assert search('"') == []
    assert search("[") == []
    assert search(",") == []
    assert search("%") == []
    assert search("_") == []
    assert search("café") == ["Two"]
    assert search("CAFÉ") == ["Two"]
    assert search("go") == ["One"]


def test_technology_search_text_follows_updates(client, admin_headers, project_payload, db_session):
    created = client.post("/api/projects", json=project_payload(technologies=["Go"]), headers=admin_headers)
    project_id = created.json()["data"]["id"]

    client.put(f"/api/projects/{project_id}", json={"technologies": ["Rust", "Élixir"]}, headers=admin_headers)

    assert db_session.get(Project, project_id).technologies_text == "rust\nélixir"
    assert client.get("/api/projects", params={"search": "go"}).json()["data"] == []
    assert len(client.get("/api/projects", params={"search": "ÉLIX"}).json()["data"]) == 1


def test_explicit_slug_is_normalised(client, admin_headers, project_payload):
    response = client.post(
        "/api/projects", json=project_payload(slug="Hello World/../x"), headers=admin_headers
    )

    assert response.status_code == 201
    project = response.json()["data"]
    assert project["slug"] == "hello-world-x"

    updated = client.put(
        f"/api/projects/{project['id']}", json={"slug": "  Second Take! "}, headers=admin_headers
    )
    assert updated.json()["data"]["slug"] == "second-take"

    sitemap = client.get("/sitemap.xml").text
    assert "/projects/second-take<" in sitemap
    assert "Hello World" not in sitemap


def test_slug_without_letters_or_digits_rejected(client, admin_headers, project_payload):
    response = client.post("/api/projects", json=project_payload(slug="/../"), headers=admin_headers)

    assert response.status_code == 400
    assert response.json()["details"] == [{"path": ["slug"], "message": "Slug must contain letters or digits"}]


def test_unauthenticated_write_rejected_before_body_parsing(client, db_session):
    responses = [
        client.post("/api/projects", content=b"{not json", headers={"Content-Type": "application/json"}),
        client.put("/api/projects/x", content=b"{not json", headers={"Content-Type": "application/json"}),
        client.post("/api/projects", json={}),
    ]

    for response in responses:
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Unauthorized"}
    assert db_session.query(Project).count() == 0
