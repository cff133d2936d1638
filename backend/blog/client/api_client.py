"""Blog API Client — async wrappers over the HTTP API.

Invariants:
    - Every non-2xx response raises ApiError carrying the server's message,
      or the call's fallback message when the body has none
    - login_user stores token + user in the session; logout_user clears both
    - Authorization header sent only when the session holds a token
    - No retries, no token refresh

Design Decisions:
    - One httpx.AsyncClient per call: the client object holds no connections
    - transport is injectable so tests can drive the ASGI app in-process
"""

import logging
from typing import Any

import httpx

from blog.client.session import ClientSession
from blog.config import get_settings

logger = logging.getLogger(__name__)


class ApiError(Exception):
    """Non-2xx API response."""

    def __init__(self, status_code: int, message: str, code: str | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.code = code


def _error_from_response(response: httpx.Response, fallback: str) -> ApiError:
    try:
        body = response.json()
    except ValueError:
        body = None
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict):
        return ApiError(
            response.status_code, error.get("message") or fallback, error.get("code"),
        )
    if isinstance(error, str) and error:
        return ApiError(response.status_code, error)
    return ApiError(response.status_code, fallback)


class BlogClient:
    """Async data-access functions for one client session."""

    def __init__(
        self,
        session: ClientSession,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.session = session
        self.base_url = (base_url or get_settings().api_url).rstrip("/")
        self._transport = transport

    async def _request(
        self,
        method: str,
        path: str,
        fallback: str,
        *,
        json: dict | None = None,
        params: dict | None = None,
        authenticated: bool = False,
    ) -> Any:
        headers = self.session.auth_headers() if authenticated else {}
        async with httpx.AsyncClient(
            base_url=self.base_url, transport=self._transport,
        ) as http:
            response = await http.request(
                method, path, json=json, params=params, headers=headers,
            )
        if not response.is_success:
            error = _error_from_response(response, fallback)
            logger.warning(
                f"{method} {path} failed with {response.status_code}: {error.message}",
            )
            raise error
        return response.json()

    # ─── Auth ────────────────────────────────────────────────────

    async def register_user(self, name: str, email: str, password: str) -> dict:
        return await self._request(
            "POST", "/auth/register", "Failed to register",
            json={"name": name, "email": email, "password": password},
        )

    async def login_user(self, email: str, password: str) -> dict:
        data = await self._request(
            "POST", "/auth/login", "Failed to login",
            json={"email": email, "password": password},
        )
        self.session.store(data["token"], data["user"])
        return data

    def logout_user(self) -> None:
        self.session.clear()

    def get_auth_token(self) -> str | None:
        return self.session.token

    def get_current_user(self) -> dict | None:
        return self.session.user

    # ─── Posts & comments ────────────────────────────────────────

    async def get_posts(self, page: int = 1, limit: int = 10, search: str = "") -> dict:
        params: dict[str, Any] = {"page": page, "limit": limit}
        if search:
            params["search"] = search
        return await self._request(
            "GET", "/posts", "Failed to fetch posts", params=params,
        )

    async def get_post(self, post_id: int) -> dict:
        return await self._request(
            "GET", f"/posts/{post_id}", "Failed to fetch post",
        )

    async def create_post(self, title: str, content: str) -> dict:
        return await self._request(
            "POST", "/posts", "Failed to create post",
            json={"title": title, "content": content},
            authenticated=True,
        )

    async def create_comment(self, post_id: int, content: str) -> dict:
        return await self._request(
            "POST", "/comments", "Failed to create comment",
            json={"content": content, "postId": post_id},
            authenticated=True,
        )
