from fastapi.testclient import TestClient


def test_create_then_read_by_email_id_and_listing(client: TestClient):
    r = client.post("/users", json={"id": "u1", "email": "a@x.com"})
    assert r.status_code == 201, r.text
    assert r.json()["id"] == "u1"

    r = client.get("/users", params={"email": "a@x.com"})
    assert r.status_code == 200
    assert r.json()["id"] == "u1"

    r = client.get("/users", params={"id": "u1"})
    assert r.status_code == 200
    assert r.json()["email"] == "a@x.com"

    r = client.get("/users")
    assert r.status_code == 200
    assert any(u["id"] == "u1" for u in r.json())


def test_listing_cardinality_matches_store(client: TestClient, user_factory):
    for i in range(4):
        user_factory(f"user-{i}", email=f"{i}@x.com")
    r = client.get("/users")
    assert r.status_code == 200
    assert len(r.json()) == 4


def test_read_unknown_user_is_no_content(client: TestClient):
    r = client.get("/users", params={"id": "missing"})
    assert r.status_code == 204
    assert r.content == b""


def test_create_duplicate_user_is_conflict(client: TestClient):
    assert client.post("/users", json={"id": "u1", "email": "a@x.com"}).status_code == 201
    r = client.post("/users", json={"id": "u2", "email": "a@x.com"})
    assert r.status_code == 409


def test_partial_update_keeps_unspecified_fields(client: TestClient):
    client.post("/users", json={"id": "u1", "email": "a@x.com", "image": "https://img/a.png"})

    r = client.put("/users", params={"id": "u1"}, json={"name": "Bob"})
    assert r.status_code == 200, r.text
    body = r.json()
    assert body["name"] == "Bob"
    assert body["email"] == "a@x.com"
    assert body["image"] == "https://img/a.png"

    r = client.put("/users", params={"id": "u1"}, json={"email": "b@x.com"})
    assert r.status_code == 200
    body = r.json()
    assert body["name"] == "Bob"
    assert body["email"] == "b@x.com"


def test_update_sets_email_verified_at(client: TestClient, user_factory):
    user_factory("u1", email="a@x.com")
    r = client.put("/users", params={"id": "u1"}, json={"email_verified_at": "2024-05-01T12:00:00+00:00"})
    assert r.status_code == 200
    assert r.json()["email_verified_at"].startswith("2024-05-01T12:00:00")


def test_update_without_id_is_unprocessable(client: TestClient):
    r = client.put("/users", json={"name": "Bob"})
    assert r.status_code == 422
    assert "id" in r.json()["detail"]


def test_update_unknown_user_is_not_found(client: TestClient):
    r = client.put("/users", params={"id": "ghost"}, json={"name": "Bob"})
    assert r.status_code == 404


def test_delete_user_then_again_is_not_found(client: TestClient, user_factory):
    user_factory("u1", email="a@x.com")
    r = client.delete("/users", params={"id": "u1"})
    assert r.status_code == 200
    assert r.json()["id"] == "u1"
    assert client.delete("/users", params={"id": "u1"}).status_code == 404
    assert client.delete("/users").status_code == 422


def test_update_naming_id_is_rejected_and_id_kept(client: TestClient, user_factory):
    user_factory("u1", email="a@x.com")
    r = client.put("/users", params={"id": "u1"}, json={"id": "u2", "name": "Bob"})
    assert r.status_code == 422

    r = client.get("/users", params={"id": "u1"})
    assert r.status_code == 200
    assert r.json()["name"] is None
    assert client.get("/users", params={"id": "u2"}).status_code == 204


def test_update_with_form_body_is_unprocessable(client: TestClient, user_factory):
    user_factory("u1", email="a@x.com")
    r = client.put("/users", params={"id": "u1"}, data={"name": "Bob"})
    assert r.status_code == 422
    assert client.get("/users", params={"id": "u1"}).json()["name"] is None


def test_delete_user_removes_accounts_and_sessions(
    client: TestClient, user_factory, account_factory, session_factory
):
    user = user_factory("u1", email="a@x.com")
    account_factory(user, "google", "42")
    session_factory(user, "tok-1")
    assert client.get("/sessions", params={"session_token": "tok-1"}).status_code == 200

    assert client.delete("/users", params={"id": "u1"}).status_code == 200

    assert client.get("/sessions", params={"session_token": "tok-1"}).status_code == 204
    assert client.get("/users", params={"provider": "google"}).status_code == 204
