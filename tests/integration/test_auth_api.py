"""End-to-end tests for signup and login over HTTP."""

from jose import jwt


def test_signup_returns_public_user(client):
    resp = client.post("/api/signup", json={"username": "alice", "password": "pw1"})

    assert resp.status_code == 201
    body = resp.json()
    assert set(body) == {"id", "username", "created_at"}
    assert body["username"] == "alice"


def test_duplicate_signup_is_409(client):
    assert client.post("/api/signup", json={"username": "alice", "password": "pw1"}).status_code == 201

    resp = client.post("/api/signup", json={"username": "alice", "password": "pw2"})
    assert resp.status_code == 409
    assert resp.json()["error"] == "DuplicateUsername"
    assert resp.json()["message"] == "Username already exists"


def test_signup_with_empty_fields_is_400(client):
    resp = client.post("/api/signup", json={"username": "", "password": "pw"})
    assert resp.status_code == 400
    assert resp.json()["message"] == "Username and password are required"

    resp = client.post("/api/signup", json={"username": "alice"})
    assert resp.status_code == 400


def test_login_returns_token_and_user(client, test_settings):
    signup = client.post("/api/signup", json={"username": "alice", "password": "pw1"}).json()

    resp = client.post("/api/login", json={"username": "alice", "password": "pw1"})
    assert resp.status_code == 200
    body = resp.json()
    assert body["user"] == signup

    payload = jwt.decode(body["token"], test_settings.secret_key, algorithms=[test_settings.algorithm])
    assert payload["id"] == signup["id"]
    assert payload["username"] == "alice"


def test_login_failures_are_identical(client):
    client.post("/api/signup", json={"username": "alice", "password": "pw1"})

    wrong_password = client.post("/api/login", json={"username": "alice", "password": "nope"})
    unknown_user = client.post("/api/login", json={"username": "mallory", "password": "pw1"})

    assert wrong_password.status_code == unknown_user.status_code == 401
    strip = lambda body: {k: v for k, v in body.items() if k != "timestamp"}  # noqa: E731
    assert strip(wrong_password.json()) == strip(unknown_user.json())


def test_token_from_other_secret_is_rejected(client):
    forged = jwt.encode({"id": 1, "username": "alice"}, "guessed-secret", algorithm="HS256")
    resp = client.get("/api/notes", headers={"Authorization": f"Bearer {forged}"})
    assert resp.status_code == 401


def test_overlong_login_fails_like_unknown_user(client):
    client.post("/api/signup", json={"username": "alice", "password": "pw1"})

    overlong = client.post("/api/login", json={"username": "u" * 51, "password": "p" * 300})
    unknown = client.post("/api/login", json={"username": "nobody", "password": "pw1"})

    assert overlong.status_code == unknown.status_code == 401
    assert overlong.json()["message"] == unknown.json()["message"]


def test_overlong_signup_username_is_400(client):
    resp = client.post("/api/signup", json={"username": "u" * 51, "password": "pw1"})
    assert resp.status_code == 400
