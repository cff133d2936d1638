"""Registration — public projection, database-enforced email uniqueness.

Invariants:
    - Password (plain or hashed) never appears in the response
    - Second registration with the same email is 400 with code CONFLICT and adds no row
"""

from sqlalchemy import func, select

from blog.infrastructure.security import verify_password
from blog.models.user import User
from tests.helpers import TEST_PASSWORD, register


async def test_register_returns_public_projection(client):
    res = await register(client)
    assert res.status_code == 200
    body = res.json()
    assert set(body) == {"id", "name", "email", "createdAt"}
    assert body["name"] == "Alice"
    assert body["email"] == "alice@example.com"


async def test_register_stores_bcrypt_hash(client, test_db):
    await register(client)
    user = (await test_db.execute(select(User))).scalar_one()
    assert user.password != TEST_PASSWORD
    assert verify_password(TEST_PASSWORD, user.password)


async def test_duplicate_email_is_conflict_and_not_persisted(client, test_db):
    first = await register(client)
    second = await register(client, name="Impostor")

    assert first.status_code == 200
    assert second.status_code == 400
    error = second.json()["error"]
    assert error["code"] == "CONFLICT"
    assert error["message"] == "User with this email already exists"
    assert error["details"]["field"] == "email"

    count = (await test_db.execute(
        select(func.count(User.id)).where(User.email == "alice@example.com"),
    )).scalar_one()
    assert count == 1


async def test_register_after_conflict_still_works(client):
    await register(client)
    await register(client)
    res = await register(client, name="Bob", email="bob@example.com")
    assert res.status_code == 200


async def test_missing_fields_are_validation_errors(client):
    res = await client.post("/api/auth/register", json={"email": "a@b.c"})
    assert res.status_code == 400
    body = res.json()["error"]
    assert body["code"] == "VALIDATION_ERROR"
    fields = {d["field"] for d in body["details"]}
    assert "body.name" in fields
    assert "body.password" in fields


async def test_email_without_at_sign_is_rejected(client):
    res = await register(client, email="not-an-email")
    assert res.status_code == 400


async def test_password_over_bcrypt_limit_is_rejected(client):
    res = await register(client, password="x" * 73)
    assert res.status_code == 400
