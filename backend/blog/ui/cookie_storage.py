"""Cookie Storage — SessionStorage backed by signed browser cookies.

Invariants:
    - Reads see writes made earlier in the same request
    - Writes only reach the browser once apply() is called on the outgoing response
    - Cookie value is "<base64url value>|<hmac-sha256 hex>"; a missing or
      wrong signature reads as None, so a hand-edited cookie is never displayed
"""

import base64
import binascii
import hashlib
import hmac
import logging

from fastapi import Request, Response

logger = logging.getLogger(__name__)

COOKIE_MAX_AGE = 60 * 60 * 24 * 30


def _signature(secret: str, payload: str) -> str:
    return hmac.new(
        secret.encode("utf-8"), payload.encode("ascii"), hashlib.sha256,
    ).hexdigest()


def make_secure_value(secret: str, value: str) -> str:
    payload = base64.urlsafe_b64encode(value.encode("utf-8")).decode("ascii")
    return f"{payload}|{_signature(secret, payload)}"


def check_secure_value(secret: str, raw: str) -> str | None:
    """Return the value carried by a signed cookie, or None if it was tampered with."""
    payload, sep, signature = raw.rpartition("|")
    if not sep or not hmac.compare_digest(signature, _signature(secret, payload)):
        logger.warning("Discarding session cookie with a bad signature")
        return None
    try:
        return base64.urlsafe_b64decode(payload.encode("ascii")).decode("utf-8")
    except (binascii.Error, UnicodeError, ValueError):
        logger.warning("Discarding undecodable session cookie")
        return None


class CookieStorage:
    """Per-request view over the session cookies."""

    def __init__(self, request: Request, secret: str, secure: bool = False):
        self._cookies = dict(request.cookies)
        self._pending: dict[str, str | None] = {}
        self.secret = secret
        self.secure = secure

    def get_item(self, key: str) -> str | None:
        if key in self._pending:
            return self._pending[key]
        raw = self._cookies.get(key)
        return check_secure_value(self.secret, raw) if raw else None

    def set_item(self, key: str, value: str) -> None:
        self._pending[key] = value

    def remove_item(self, key: str) -> None:
        self._pending[key] = None

    def apply(self, response: Response) -> Response:
        """Copy pending writes onto response as Set-Cookie headers."""
        for key, value in self._pending.items():
            if value is None:
                response.delete_cookie(key, path="/")
            else:
                response.set_cookie(
                    key,
                    make_secure_value(self.secret, value),
                    max_age=COOKIE_MAX_AGE,
                    path="/",
                    httponly=True,
                    samesite="lax",
                    secure=self.secure,
                )
        return response
