"""Test helpers shared across test packages."""

TEST_PASSWORD = "correct horse battery staple"


async def register(
    client, name="Alice", email="alice@example.com", password=TEST_PASSWORD,
):
    return await client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )


async def login(client, email="alice@example.com", password=TEST_PASSWORD) -> dict:
    res = await client.post(
        "/api/auth/login", json={"email": email, "password": password},
    )
    assert res.status_code == 200, res.text
    return res.json()
