"""Comment Schemas — creation body and comment projection."""

from datetime import datetime

from pydantic import Field

from blog.schemas.base import CamelModel


class CommentAuthor(CamelModel):
    id: int
    name: str


class CommentCreate(CamelModel):
    """Comment body. authorId is accepted from older clients and ignored."""
    content: str = Field(min_length=1)
    post_id: int
    author_id: int | None = None


class CommentResponse(CamelModel):
    id: int
    content: str
    post_id: int
    author_id: int
    created_at: datetime
    author: CommentAuthor
