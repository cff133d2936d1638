"""Post Service — listing/search with pagination, detail lookup, creation.

Invariants:
    - Search is a case-insensitive substring match on title OR content;
      "%" and "_" in the search text match literally
    - Empty search matches every post
    - Listing order: created_at DESC, then id DESC for rows created in the same instant
    - total counts every matching post, independent of page/limit
    - Created posts are always published and attributed to the given author

Design Decisions:
    - Page and count are two independent reads; no snapshot is shared between them
    - Comment counts come from a correlated subquery, comments themselves are not loaded
"""

import logging

from sqlalchemy import ColumnElement, func, or_, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from blog.core.domain_types import PostId
from blog.core.errors import ResourceNotFoundError
from blog.core.pagination import PageRequest
from blog.models.comment import Comment
from blog.models.post import Post
from blog.models.user import User
from blog.schemas.post import PostCreate

logger = logging.getLogger(__name__)


def build_search_filter(search: str) -> ColumnElement[bool]:
    return or_(
        Post.title.icontains(search, autoescape=True),
        Post.content.icontains(search, autoescape=True),
    )


async def list_posts(
    db: AsyncSession, request: PageRequest, search: str = "",
) -> tuple[list[tuple[Post, int]], int]:
    """Return one page of (post, comment_count) rows and the total match count."""
    criteria = build_search_filter(search)
    comment_count = (
        select(func.count(Comment.id))
        .where(Comment.post_id == Post.id)
        .correlate(Post)
        .scalar_subquery()
    )
    page_query = (
        select(Post, comment_count.label("comment_count"))
        .where(criteria)
        .order_by(Post.created_at.desc(), Post.id.desc())
        .offset(request.skip)
        .limit(request.row_limit)
    )
    count_query = select(func.count(Post.id)).where(criteria)

    rows = (await db.execute(page_query)).all()
    total = (await db.execute(count_query)).scalar_one()
    return [(row[0], row[1]) for row in rows], total


async def get_post_detail(db: AsyncSession, post_id: PostId) -> Post:
    """Load a post with its author and comments or raise ResourceNotFoundError."""
    result = await db.execute(
        select(Post)
        .options(selectinload(Post.comments).selectinload(Comment.author))
        .where(Post.id == post_id),
    )
    post = result.scalar_one_or_none()
    if not post:
        raise ResourceNotFoundError("Post", str(post_id))
    return post


async def create_post(db: AsyncSession, author: User, body: PostCreate) -> Post:
    if body.author_id is not None and body.author_id != author.id:
        logger.warning(
            f"Ignoring client-supplied authorId {body.author_id}",
            extra={"user_id": author.id},
        )
    post = Post(
        title=body.title,
        content=body.content,
        published=True,
        author=author,
    )
    db.add(post)
    await db.commit()
    logger.info(
        "Post created", extra={"user_id": author.id, "post_id": post.id},
    )
    return post
