"""Client Session — the token and user projection of whoever is logged in.

Invariants:
    - store() writes both entries, clear() removes both
    - user is None whenever the stored entry is missing or not valid JSON
    - Passed explicitly to BlogClient and UI handlers; nothing reads storage behind its back
"""

import json
import logging

from blog.client.storage import SessionStorage
from blog.core.domain_types import AUTH_TOKEN_KEY, USER_KEY

logger = logging.getLogger(__name__)


class ClientSession:
    """Read/write view over the two session entries of a SessionStorage."""

    def __init__(self, storage: SessionStorage):
        self.storage = storage

    @property
    def token(self) -> str | None:
        return self.storage.get_item(AUTH_TOKEN_KEY)

    @property
    def user(self) -> dict | None:
        raw = self.storage.get_item(USER_KEY)
        if not raw:
            return None
        try:
            return json.loads(raw)
        except json.JSONDecodeError:
            logger.warning("Stored user entry is not valid JSON")
            return None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None and self.user is not None

    def store(self, token: str, user: dict) -> None:
        self.storage.set_item(AUTH_TOKEN_KEY, token)
        self.storage.set_item(USER_KEY, json.dumps(user))

    def clear(self) -> None:
        self.storage.remove_item(AUTH_TOKEN_KEY)
        self.storage.remove_item(USER_KEY)

    def auth_headers(self) -> dict[str, str]:
        token = self.token
        return {"Authorization": f"Bearer {token}"} if token else {}
