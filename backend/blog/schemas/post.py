"""Post Schemas — creation body, list/detail projections and pagination envelope.

Invariants:
    - Every post projection embeds its author as {id, name, email}
    - PostListResponse.pagination.total is the full matching count, not the page size
"""

from datetime import datetime

from pydantic import Field

from blog.schemas.base import CamelModel
from blog.schemas.comment import CommentResponse


class AuthorSummary(CamelModel):
    id: int
    name: str
    email: str


class PostCreate(CamelModel):
    """Post body. authorId is accepted from older clients and ignored."""
    title: str = Field(min_length=1, max_length=255)
    content: str = Field(min_length=1)
    author_id: int | None = None


class PostResponse(CamelModel):
    id: int
    title: str
    content: str
    published: bool
    author_id: int
    created_at: datetime
    author: AuthorSummary


class PostSummary(PostResponse):
    """Listing entry: a post plus its comment count."""
    comment_count: int = 0


class PostDetail(PostResponse):
    comments: list[CommentResponse] = []


class PaginationInfo(CamelModel):
    total: int
    pages: int
    page: int
    limit: int


class PostListResponse(CamelModel):
    posts: list[PostSummary]
    pagination: PaginationInfo
