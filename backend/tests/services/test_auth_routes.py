"""Passkey auth routes — login, logout, session-gated access.

Invariants:
    - Unknown passkey → 401 INVALID_PASSKEY
    - Resource routes without a bearer token → 401 AUTHENTICATION_REQUIRED
    - After logout the token no longer works
"""

PASSKEY = "open-sesame"
USERNAME = "couple"


async def test_login_with_valid_passkey_returns_token(client):
    res = await client.post("/api/v1/auth/login", json={"passkey": PASSKEY})
    assert res.status_code == 200
    body = res.json()
    assert body["username"] == USERNAME
    assert body["token"]
    assert "expiresAt" in body
    assert isinstance(body["userId"], int)


async def test_login_with_unknown_passkey_is_rejected(client):
    res = await client.post("/api/v1/auth/login", json={"passkey": "wrong"})
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_PASSKEY"


async def test_login_without_passkey_is_validation_error(client):
    res = await client.post("/api/v1/auth/login", json={})
    assert res.status_code == 400
    assert res.json()["error"]["code"] == "VALIDATION_ERROR"


async def test_same_user_row_for_repeated_logins(client):
    a = await client.post("/api/v1/auth/login", json={"passkey": PASSKEY})
    b = await client.post("/api/v1/auth/login", json={"passkey": PASSKEY})
    assert a.json()["userId"] == b.json()["userId"]
    assert a.json()["token"] != b.json()["token"]


async def test_me_returns_session_user(client, auth_headers):
    res = await client.get("/api/v1/auth/me", headers=auth_headers)
    assert res.status_code == 200
    assert res.json()["username"] == USERNAME


async def test_resource_routes_require_token(client):
    for path in (
        "/api/v1/timeline", "/api/v1/photos", "/api/v1/notes",
        "/api/v1/settings", "/api/v1/countdown",
    ):
        res = await client.get(path)
        assert res.status_code == 401, path
        assert res.json()["error"]["code"] == "AUTHENTICATION_REQUIRED"


async def test_unknown_token_is_rejected(client):
    res = await client.get(
        "/api/v1/notes", headers={"Authorization": "Bearer not-a-session"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "INVALID_SESSION"


async def test_logout_invalidates_token(client, auth_headers):
    res = await client.post("/api/v1/auth/logout", headers=auth_headers)
    assert res.status_code == 204
    res = await client.get("/api/v1/notes", headers=auth_headers)
    assert res.status_code == 401
