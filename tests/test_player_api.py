from __future__ import annotations

from roster.app import app

JOHN = {"name": "John", "surname": "Doe", "email": "john@example.com"}


def _assert_envelope(body: dict, status: int) -> None:
    assert set(body) == {"status", "message", "timestamp", "details"}
    assert body["status"] == status
    assert body["timestamp"]


def test_create_player_returns_201_with_id(client):
    resp = client.post("/api/player", json=JOHN)
    assert resp.status_code == 201
    assert resp.headers["content-type"] == "application/json; charset=utf-8"
    body = resp.json()
    assert isinstance(body["id"], int)
    assert {k: body[k] for k in JOHN} == JOHN


def test_create_ignores_client_id_and_unknown_fields(client):
    resp = client.post("/api/player", json={**JOHN, "id": 500, "nickname": "JD"})
    assert resp.status_code == 201
    body = resp.json()
    assert body["id"] != 500
    assert "nickname" not in body


def test_get_player_round_trip(client):
    created = client.post("/api/player", json=JOHN).json()
    resp = client.get(f"/api/player/{created['id']}")
    assert resp.status_code == 200
    assert resp.json() == created


def test_list_players(client):
    client.post("/api/player", json=JOHN)
    client.post("/api/player", json={"name": "Jane", "surname": "Smith", "email": "jane@example.com"})
    resp = client.get("/api/player")
    assert resp.status_code == 200
    body = resp.json()
    assert [p["name"] for p in body] == ["John", "Jane"]
    assert body[1]["surname"] == "Smith"


def test_get_missing_player_returns_404_envelope(client):
    resp = client.get("/api/player/999")
    assert resp.status_code == 404
    body = resp.json()
    _assert_envelope(body, 404)
    assert body["message"] == "Player with id 999 not found"
    assert body["details"] == "The requested player does not exist"


def test_invalid_player_returns_400_with_all_fields(client):
    resp = client.post("/api/player", json={"name": "", "surname": "", "email": "invalid-email"})
    assert resp.status_code == 400
    body = resp.json()
    _assert_envelope(body, 400)
    assert body["message"] == "Validation failed"
    assert body["details"] == {
        "name": "Name cannot be blank",
        "surname": "Surname cannot be blank",
        "email": "Email should be valid",
    }
    assert client.get("/api/player").json() == []


def test_malformed_json_returns_400(client):
    resp = client.post(
        "/api/player",
        content=b"{not json",
        headers={"Content-Type": "application/json"},
    )
    assert resp.status_code == 400
    assert resp.json()["message"] == "Validation failed"
    assert resp.json()["details"] == {"body": "JSON decode error"}


def test_non_integer_id_returns_400(client):
    resp = client.get("/api/player/abc")
    assert resp.status_code == 400
    assert "player_id" in resp.json()["details"]


def test_duplicate_email_returns_409(client):
    client.post("/api/player", json={"name": "Alice", "surname": "Smith", "email": "alice@example.com"})
    resp = client.post("/api/player", json={"name": "Alice", "surname": "Smith", "email": "alice@example.com"})
    assert resp.status_code == 409
    body = resp.json()
    _assert_envelope(body, 409)
    assert body["message"] == "Database constraint violation"
    assert body["details"] == "Database constraint violation"


def test_update_player_replaces_fields(client):
    created = client.post("/api/player", json=JOHN).json()
    new = {"name": "Johnny", "surname": "Doe", "email": "johnny@example.com"}
    resp = client.put(f"/api/player/{created['id']}", json=new)
    assert resp.status_code == 200
    assert resp.json() == {"id": created["id"], **new}
    assert client.get(f"/api/player/{created['id']}").json() == {"id": created["id"], **new}


def test_update_missing_player_returns_404(client):
    resp = client.put("/api/player/31", json=JOHN)
    assert resp.status_code == 404
    assert resp.json()["message"] == "Player with id 31 not found"


def test_update_with_invalid_body_returns_400_before_lookup(client):
    resp = client.put("/api/player/31", json={"name": " ", "surname": "Doe", "email": "x@example.com"})
    assert resp.status_code == 400
    assert resp.json()["details"] == {"name": "Name cannot be blank"}


def test_update_to_taken_email_returns_409(client):
    client.post("/api/player", json=JOHN)
    other = client.post("/api/player", json={"name": "Jane", "surname": "Smith", "email": "jane@example.com"}).json()
    resp = client.put(f"/api/player/{other['id']}", json={"name": "Jane", "surname": "Smith", "email": JOHN["email"]})
    assert resp.status_code == 409


def test_delete_player_twice_returns_204(client):
    created = client.post("/api/player", json=JOHN).json()
    first = client.delete(f"/api/player/{created['id']}")
    second = client.delete(f"/api/player/{created['id']}")
    assert first.status_code == 204
    assert second.status_code == 204
    assert first.content == b""
    assert client.get(f"/api/player/{created['id']}").status_code == 404


def test_random_player_on_empty_table_returns_500(client):
    resp = client.get("/api/player/random")
    assert resp.status_code == 500
    body = resp.json()
    _assert_envelope(body, 500)
    assert body["message"] == "No players available"
    assert body["details"] == "Unexpected error occurred"


def test_random_player_returns_existing_row(client):
    ids = {client.post("/api/player", json={"name": f"P{i}", "surname": "Doe", "email": f"p{i}@example.com"}).json()["id"] for i in range(3)}
    for _ in range(10):
        resp = client.get("/api/player/random")
        assert resp.status_code == 200
        assert resp.json()["id"] in ids


def test_unexpected_error_returns_500_envelope(client, monkeypatch):
    def boom():
        raise RuntimeError("Internal server error")

    monkeypatch.setattr(app.state.player_service, "list_all", boom)
    resp = client.get("/api/player")
    assert resp.status_code == 500
    body = resp.json()
    _assert_envelope(body, 500)
    assert body["message"] == "Internal server error"
    assert body["details"] == "Unexpected error occurred"


def test_unknown_route_returns_404_envelope(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.headers["content-type"] == "application/json; charset=utf-8"
    body = resp.json()
    _assert_envelope(body, 404)
    assert body["message"] == "Not Found"


def test_wrong_method_returns_405_envelope(client):
    resp = client.post("/api/player/random", json=JOHN)
    assert resp.status_code == 405
    assert resp.headers["content-type"] == "application/json; charset=utf-8"
    assert "GET" in resp.headers["allow"]
    body = resp.json()
    _assert_envelope(body, 405)
    assert body["message"] == "Method Not Allowed"
    assert body["details"] == "Unexpected error occurred"
