"""UI Routes — list/search, detail with comments, create post, register, login, logout.

Invariants:
    - Every page request re-fetches what it shows (no shared cache)
    - Mutations answer with a 303 redirect so the next page load re-fetches in full
    - ApiError is caught, logged, and rendered as an error/empty/not-found state
    - Pages requiring login redirect to /login when the session has no token
"""

import logging
from datetime import datetime
from pathlib import Path
from urllib.parse import quote

from fastapi import APIRouter, Depends, Form, Query, Request, status
from fastapi.responses import RedirectResponse, Response
from fastapi.templating import Jinja2Templates

from blog.client.api_client import ApiError, BlogClient
from blog.client.session import ClientSession
from blog.config import get_settings
from blog.core.domain_types import DEFAULT_LIMIT
from blog.ui.cookie_storage import CookieStorage

logger = logging.getLogger(__name__)
router = APIRouter(tags=["ui"], include_in_schema=False)

templates = Jinja2Templates(directory=str(Path(__file__).parent / "templates"))


def format_date(value: str | None, fmt: str = "%B %d, %Y") -> str:
    if not value:
        return ""
    try:
        return datetime.fromisoformat(value).strftime(fmt)
    except ValueError:
        return value


templates.env.filters["format_date"] = format_date


# ─── Dependencies ────────────────────────────────────────────────

def get_client_session(request: Request) -> ClientSession:
    settings = get_settings()
    return ClientSession(
        CookieStorage(
            request,
            secret=settings.session_cookie_secret,
            secure=settings.session_cookie_secure,
        ),
    )


def get_blog_client(
    session: ClientSession = Depends(get_client_session),
) -> BlogClient:
    return BlogClient(session)


def _render(
    request: Request, client: BlogClient, template_name: str,
    status_code: int = status.HTTP_200_OK, **context,
) -> Response:
    context.setdefault("current_user", client.get_current_user())
    response = templates.TemplateResponse(
        request, template_name, context, status_code=status_code,
    )
    return _commit_session(client, response)


def _redirect(client: BlogClient, url: str) -> Response:
    response = RedirectResponse(url, status_code=status.HTTP_303_SEE_OTHER)
    return _commit_session(client, response)


def _commit_session(client: BlogClient, response: Response) -> Response:
    storage = client.session.storage
    if isinstance(storage, CookieStorage):
        storage.apply(response)
    return response


def _login_redirect(client: BlogClient, next_url: str) -> Response:
    return _redirect(client, f"/login?next={quote(next_url)}")


# ─── Posts ───────────────────────────────────────────────────────

@router.get("/")
@router.get("/posts")
async def post_list_page(
    request: Request,
    page: int = Query(1),
    search: str = Query(""),
    client: BlogClient = Depends(get_blog_client),
):
    """Searchable, paginated post list."""
    posts, pagination, error = [], None, None
    try:
        data = await client.get_posts(page=page, limit=DEFAULT_LIMIT, search=search)
        posts, pagination = data["posts"], data["pagination"]
    except ApiError as e:
        logger.error(f"Error fetching posts: {e.message}")
        error = e.message
    return _render(
        request, client, "posts.html",
        posts=posts, pagination=pagination, search=search, error=error,
    )


@router.get("/posts/create")
async def create_post_page(
    request: Request, client: BlogClient = Depends(get_blog_client),
):
    if not client.get_auth_token():
        return _login_redirect(client, "/posts/create")
    return _render(request, client, "post_create.html", title="", content="", error=None)


@router.post("/posts/create")
async def create_post_submit(
    request: Request,
    title: str = Form(""),
    content: str = Form(""),
    client: BlogClient = Depends(get_blog_client),
):
    if not client.get_auth_token():
        return _login_redirect(client, "/posts/create")
    try:
        post = await client.create_post(title=title, content=content)
    except ApiError as e:
        logger.error(f"Error creating post: {e.message}")
        return _render(
            request, client, "post_create.html",
            status_code=e.status_code if e.status_code < 500 else 400,
            title=title, content=content, error=e.message,
        )
    return _redirect(client, f"/posts/{post['id']}")


@router.get("/posts/{post_id:int}")
async def post_detail_page(
    request: Request,
    post_id: int,
    client: BlogClient = Depends(get_blog_client),
):
    """Post with its comments and a comment form."""
    return await _render_post_detail(request, client, post_id)


@router.post("/posts/{post_id:int}/comments")
async def comment_submit(
    request: Request,
    post_id: int,
    content: str = Form(""),
    client: BlogClient = Depends(get_blog_client),
):
    if not client.get_auth_token():
        return _login_redirect(client, f"/posts/{post_id}")
    if not content.strip():
        return _redirect(client, f"/posts/{post_id}")
    try:
        await client.create_comment(post_id=post_id, content=content)
    except ApiError as e:
        logger.error(f"Error submitting comment: {e.message}")
        return await _render_post_detail(
            request, client, post_id, comment_error=e.message, comment=content,
        )
    return _redirect(client, f"/posts/{post_id}")


async def _render_post_detail(
    request: Request, client: BlogClient, post_id: int, **extra,
) -> Response:
    try:
        post = await client.get_post(post_id)
    except ApiError as e:
        logger.error(f"Error fetching post {post_id}: {e.message}")
        return _render(
            request, client, "post_detail.html",
            status_code=status.HTTP_404_NOT_FOUND if e.status_code == 404
            else status.HTTP_502_BAD_GATEWAY,
            post=None,
        )
    extra.setdefault("comment", "")
    extra.setdefault("comment_error", None)
    return _render(request, client, "post_detail.html", post=post, **extra)


# ─── Account ─────────────────────────────────────────────────────

@router.get("/register")
async def register_page(request: Request, client: BlogClient = Depends(get_blog_client)):
    return _render(request, client, "register.html", name="", email="", error=None)


@router.post("/register")
async def register_submit(
    request: Request,
    name: str = Form(""),
    email: str = Form(""),
    password: str = Form(""),
    client: BlogClient = Depends(get_blog_client),
):
    try:
        await client.register_user(name=name, email=email, password=password)
    except ApiError as e:
        logger.warning(f"Registration failed: {e.message}")
        return _render(
            request, client, "register.html",
            status_code=e.status_code if e.status_code < 500 else 400,
            name=name, email=email, error=e.message,
        )
    return _redirect(client, "/login?registered=1")


@router.get("/login")
async def login_page(
    request: Request,
    next: str = Query("/"),
    registered: bool = Query(False),
    client: BlogClient = Depends(get_blog_client),
):
    return _render(
        request, client, "login.html",
        email="", next=next, registered=registered, error=None,
    )


@router.post("/login")
async def login_submit(
    request: Request,
    email: str = Form(""),
    password: str = Form(""),
    next: str = Form("/"),
    client: BlogClient = Depends(get_blog_client),
):
    try:
        await client.login_user(email=email, password=password)
    except ApiError as e:
        logger.warning(f"Login failed: {e.message}")
        return _render(
            request, client, "login.html",
            status_code=e.status_code if e.status_code < 500 else 400,
            email=email, next=next, registered=False, error=e.message,
        )
    # only local paths, never an absolute URL from the form
    if not next.startswith("/") or next.startswith("//"):
        next = "/"
    return _redirect(client, next)


@router.post("/logout")
async def logout(client: BlogClient = Depends(get_blog_client)):
    client.logout_user()
    return _redirect(client, "/")
