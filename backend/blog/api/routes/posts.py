"""Post Routes — paginated search, detail, and creation.

Invariants:
    - page/limit are integers; values below 1 are normalized, no upper bound
    - pagination.pages == ceil(total / limit)
    - POST requires a bearer token; the token's user is the author
"""

import logging

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from blog.api.dependencies import get_current_user
from blog.core.domain_types import DEFAULT_LIMIT, DEFAULT_PAGE, PostId
from blog.core.pagination import PageRequest, build_pagination
from blog.infrastructure.database import get_db
from blog.models.user import User
from blog.schemas.post import (
    PaginationInfo, PostCreate, PostDetail, PostListResponse, PostResponse,
    PostSummary,
)
from blog.services import post_service

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/posts", tags=["posts"])


@router.get("", response_model=PostListResponse)
async def list_posts(
    page: int = Query(DEFAULT_PAGE),
    limit: int = Query(DEFAULT_LIMIT),
    search: str = Query(""),
    db: AsyncSession = Depends(get_db),
):
    """List posts matching search, newest first."""
    request = PageRequest.normalize(page, limit)
    rows, total = await post_service.list_posts(db, request, search)

    posts = []
    for post, comment_count in rows:
        item = PostSummary.model_validate(post)
        item.comment_count = comment_count
        posts.append(item)

    return PostListResponse(
        posts=posts,
        pagination=PaginationInfo(**build_pagination(total, request)),
    )


@router.get("/{post_id}", response_model=PostDetail)
async def get_post(post_id: int, db: AsyncSession = Depends(get_db)):
    post = await post_service.get_post_detail(db, PostId(post_id))
    return PostDetail.model_validate(post)


@router.post("", response_model=PostResponse)
async def create_post(
    body: PostCreate,
    user: User = Depends(get_current_user),
    db: AsyncSession = Depends(get_db),
):
    """Publish a post as the authenticated user."""
    post = await post_service.create_post(db, user, body)
    return PostResponse.model_validate(post)
