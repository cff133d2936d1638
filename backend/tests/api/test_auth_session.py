"""Login and current user — token issuance and bearer resolution."""

from tests.helpers import login, register


async def test_login_returns_token_and_user(client, registered_user):
    data = await login(client)
    assert data["token"]
    assert data["user"] == registered_user


async def test_login_with_wrong_password_is_401(client, registered_user):
    res = await client.post(
        "/api/auth/login",
        json={"email": "alice@example.com", "password": "wrong"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Invalid email or password"


async def test_login_with_unknown_email_gives_same_error(client):
    res = await client.post(
        "/api/auth/login",
        json={"email": "nobody@example.com", "password": "whatever"},
    )
    assert res.status_code == 401
    assert res.json()["error"]["message"] == "Invalid email or password"


async def test_me_returns_token_owner(client, registered_user, auth_headers):
    res = await client.get("/api/auth/me", headers=auth_headers)
    assert res.status_code == 200
    assert res.json() == registered_user


async def test_me_without_token_is_401(client):
    res = await client.get("/api/auth/me")
    assert res.status_code == 401
    assert res.json()["error"]["code"] == "AUTHENTICATION_ERROR"


async def test_me_with_garbage_token_is_401(client):
    res = await client.get(
        "/api/auth/me", headers={"Authorization": "Bearer garbage"},
    )
    assert res.status_code == 401


async def test_tokens_are_per_user(client):
    await register(client)
    await register(client, name="Bob", email="bob@example.com")
    bob = await login(client, email="bob@example.com")
    res = await client.get(
        "/api/auth/me", headers={"Authorization": f"Bearer {bob['token']}"},
    )
    assert res.json()["name"] == "Bob"
