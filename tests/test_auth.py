from portfolio.auth.security import create_access_token, decode_access_token, is_guarded_path, requires_session
from portfolio.config import SESSION_COOKIE_NAME

from conftest import ADMIN_EMAIL, ADMIN_PASSWORD


def test_login_returns_token_and_sets_cookie(client, admin_user):
    response = client.post("/api/auth/login", json={"email": ADMIN_EMAIL.upper(), "password": ADMIN_PASSWORD})

    assert response.status_code == 200
    data = response.json()["data"]
    assert data["tokenType"] == "bearer"
    assert data["expiresIn"] == 24 * 60 * 60
    assert data["user"] == {"id": admin_user.id, "email": ADMIN_EMAIL}
    assert SESSION_COOKIE_NAME in response.cookies

    session = decode_access_token(data["accessToken"])
    assert session.user_id == admin_user.id
    assert session.email == ADMIN_EMAIL


def test_login_rejects_bad_credentials(client, admin_user):
    wrong_password = client.post("/api/auth/login", json={"email": ADMIN_EMAIL, "password": "nope"})
    unknown_user = client.post("/api/auth/login", json={"email": "ghost@example.com", "password": ADMIN_PASSWORD})

    for response in (wrong_password, unknown_user):
        assert response.status_code == 401
        assert response.json() == {"success": False, "error": "Invalid credentials"}


def test_login_validates_payload(client):
    response = client.post("/api/auth/login", json={"email": "not-an-email", "password": ""})

    assert response.status_code == 400
    paths = {tuple(d["path"]) for d in response.json()["details"]}
    assert paths == {("email",), ("password",)}


def test_session_roundtrip(client, admin_user, admin_headers):
    response = client.get("/api/auth/session", headers=admin_headers)

    assert response.status_code == 200
    assert response.json()["data"] == {"userId": admin_user.id, "email": ADMIN_EMAIL}


def test_session_from_cookie(client, admin_user):
    client.cookies.set(SESSION_COOKIE_NAME, create_access_token(admin_user.id, admin_user.email))

    response = client.get("/api/auth/session")
    assert response.status_code == 200
    assert response.json()["data"]["email"] == ADMIN_EMAIL


def test_logout_clears_cookie(client):
    response = client.post("/api/auth/logout")

    assert response.status_code == 200
    assert SESSION_COOKIE_NAME in response.headers["set-cookie"]
    assert client.get("/api/auth/session").status_code == 401


def test_expired_or_forged_token_rejected(client, admin_user):
    expired = create_access_token(admin_user.id, admin_user.email, minutes=-1)
    response = client.get("/api/auth/session", headers={"Authorization": f"Bearer {expired}"})
    assert response.status_code == 401
    assert response.json()["error"] == "Unauthorized"

    response = client.get("/api/auth/session", headers={"Authorization": "Bearer not.a.token"})
    assert response.status_code == 401


def test_admin_pages_redirect_to_login(client):
    response = client.get("/admin/projects", follow_redirects=False)

    assert response.status_code == 307
    assert response.headers["location"] == "/admin/login?callbackUrl=/admin/projects"


def test_admin_api_requires_session(client, admin_headers):
    response = client.post("/api/admin/images/reconcile")
    assert response.status_code == 401
    assert response.json() == {"success": False, "error": "Unauthorized"}


def test_login_page_is_not_guarded(client):
    response = client.get("/admin/login", follow_redirects=False)
    assert response.status_code != 307


def test_guarded_paths():
    assert is_guarded_path("/admin")
    assert is_guarded_path("/admin/skills")
    assert is_guarded_path("/api/admin/images/reconcile")
    assert not is_guarded_path("/admin/login")
    assert not is_guarded_path("/administrator")
    assert not is_guarded_path("/api/projects")


def test_api_writes_require_session_before_routing():
    assert requires_session("POST", "/api/projects")
    assert requires_session("PUT", "/api/skills/abc")
    assert requires_session("DELETE", "/api/experience/abc")
    assert requires_session("PUT", "/api/settings")
    assert requires_session("GET", "/api/contacts")
    assert requires_session("GET", "/api/upload")
    assert requires_session("GET", "/api/analytics")

    assert not requires_session("GET", "/api/projects")
    assert not requires_session("GET", "/api/settings")
    assert not requires_session("POST", "/api/contact")
    assert not requires_session("OPTIONS", "/api/projects")
    assert not requires_session("POST", "/api/auth/login")
