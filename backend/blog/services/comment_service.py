"""Comment Service — attach a comment to an existing post.

Invariants:
    - The post must exist (ResourceNotFoundError otherwise)
    - The author is always the authenticated user passed in, never the body's authorId
"""

import logging

from sqlalchemy.ext.asyncio import AsyncSession

from blog.core.errors import ResourceNotFoundError
from blog.models.comment import Comment
from blog.models.post import Post
from blog.models.user import User
from blog.schemas.comment import CommentCreate

logger = logging.getLogger(__name__)


async def create_comment(
    db: AsyncSession, author: User, body: CommentCreate,
) -> Comment:
    post = await db.get(Post, body.post_id)
    if post is None:
        raise ResourceNotFoundError("Post", str(body.post_id))

    comment = Comment(content=body.content, post_id=post.id, author=author)
    db.add(comment)
    await db.commit()
    logger.info(
        "Comment created",
        extra={
            "user_id": author.id, "post_id": post.id, "comment_id": comment.id,
        },
    )
    return comment
