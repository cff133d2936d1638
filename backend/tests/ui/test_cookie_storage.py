"""CookieStorage — signed values, pending writes, Set-Cookie on apply.

Invariants:
    - A cookie whose signature does not match its value reads as None
    - Writes are visible in the same request before apply()
"""

import base64
import json

from fastapi import Request, Response

from blog.ui.cookie_storage import CookieStorage, make_secure_value

SECRET = "cookie-test-secret"


def _request(cookies: dict[str, str] | None = None) -> Request:
    header = "; ".join(f"{k}={v}" for k, v in (cookies or {}).items())
    headers = [(b"cookie", header.encode())] if header else []
    return Request({"type": "http", "method": "GET", "path": "/", "headers": headers})


def _storage(cookies: dict[str, str] | None = None, **kwargs) -> CookieStorage:
    return CookieStorage(_request(cookies), secret=SECRET, **kwargs)


def test_reads_signed_cookie():
    storage = _storage({"auth_token": make_secure_value(SECRET, "tok")})
    assert storage.get_item("auth_token") == "tok"


def test_missing_cookie_is_none():
    assert _storage().get_item("auth_token") is None


def test_json_value_round_trips_through_cookie():
    user = json.dumps({"id": 1, "name": "Alice, Jr."})
    storage = _storage({"user": make_secure_value(SECRET, user)})
    assert storage.get_item("user") == user


def test_unsigned_cookie_is_none():
    payload = base64.urlsafe_b64encode(b'{"email": "admin@example.com"}').decode()
    assert _storage({"user": payload}).get_item("user") is None


def test_edited_value_with_old_signature_is_none():
    original = make_secure_value(SECRET, '{"email": "alice@example.com"}')
    _, _, signature = original.partition("|")
    forged_payload = base64.urlsafe_b64encode(b'{"email": "admin@example.com"}').decode()
    storage = _storage({"user": f"{forged_payload}|{signature}"})
    assert storage.get_item("user") is None


def test_cookie_signed_with_other_secret_is_none():
    storage = _storage({"auth_token": make_secure_value("other-secret", "tok")})
    assert storage.get_item("auth_token") is None


def test_pending_write_visible_before_apply():
    storage = _storage({"auth_token": make_secure_value(SECRET, "old")})
    storage.set_item("auth_token", "new")
    assert storage.get_item("auth_token") == "new"
    storage.remove_item("auth_token")
    assert storage.get_item("auth_token") is None


def test_apply_sets_and_deletes_cookies():
    storage = _storage(secure=True)
    storage.set_item("auth_token", "tok")
    storage.remove_item("user")
    response = storage.apply(Response())
    headers = response.headers.getlist("set-cookie")
    token_header = next(h for h in headers if h.startswith("auth_token="))
    user_header = next(h for h in headers if h.startswith("user="))
    assert token_header.startswith(f"auth_token={make_secure_value(SECRET, 'tok')}")
    assert "HttpOnly" in token_header
    assert "Secure" in token_header
    assert "samesite=lax" in token_header.lower()
    assert "Max-Age=0" in user_header


def test_apply_without_writes_sets_nothing():
    response = _storage().apply(Response())
    assert response.headers.getlist("set-cookie") == []
