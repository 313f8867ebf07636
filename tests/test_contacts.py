from portfolio.models.contact import Contact

MESSAGE = {"name": "Ada", "email": "ada@example.com", "message": "hello world!"}


def test_public_contact_form_stores_unread_message(client, db_session):
    response = client.post("/api/contact", json=MESSAGE)

    assert response.status_code == 200
    body = response.json()
    assert body["success"] is True
    assert body["message"] == "Message sent"
    assert body["data"]["read"] is False

    stored = db_session.query(Contact).one()
    assert stored.email == "ada@example.com"
    assert stored.read is False


def test_contact_form_validation(client, db_session):
    response = client.post("/api/contact", json={"name": "A", "email": "nope", "message": "short"})

    assert response.status_code == 400
    paths = sorted(issue["path"][0] for issue in response.json()["details"])
    assert paths == ["email", "message", "name"]
    assert db_session.query(Contact).count() == 0


def test_admin_inbox_lifecycle(client, admin_headers):
    client.post("/api/contact", json={**MESSAGE, "name": "Older"})
    client.post("/api/contact", json=MESSAGE)

    listing = client.get("/api/contacts", headers=admin_headers).json()
    assert [c["name"] for c in listing["data"]] == ["Ada", "Older"]
    contact_id = listing["data"][0]["id"]

    updated = client.put(f"/api/contacts/{contact_id}", json={"read": True}, headers=admin_headers)
    assert updated.status_code == 200
    assert updated.json()["data"]["read"] is True

    unread = client.get("/api/contacts?read=false", headers=admin_headers).json()
    assert [c["name"] for c in unread["data"]] == ["Older"]

    assert client.get(f"/api/contacts/{contact_id}", headers=admin_headers).json()["data"]["read"] is True

    deleted = client.delete(f"/api/contacts/{contact_id}", headers=admin_headers)
    assert deleted.status_code == 200
    missing = client.get(f"/api/contacts/{contact_id}", headers=admin_headers)
    assert missing.status_code == 404
    assert missing.json()["error"] == "Contact message not found"


def test_contacts_search(client, admin_headers):
    client.post("/api/contact", json=MESSAGE)
    client.post("/api/contact", json={"name": "Grace", "email": "grace@example.com", "message": "COBOL question here"})

    found = client.get("/api/contacts?search=cobol", headers=admin_headers).json()["data"]
    assert [c["name"] for c in found] == ["Grace"]


def test_inbox_is_admin_only(client):
    client.post("/api/contact", json=MESSAGE)

    assert client.get("/api/contacts").status_code == 401
    assert client.put("/api/contacts/x", json={"read": True}).status_code == 401
    assert client.delete("/api/contacts/x").status_code == 401


def test_update_missing_contact(client, admin_headers):
    response = client.put("/api/contacts/missing", json={"read": True}, headers=admin_headers)
    assert response.status_code == 404
