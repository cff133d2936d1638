"""Post ORM — a published blog entry.

Invariants:
    - Always belongs to a User (author_id FK)
    - published is set to True on creation
    - Comments are deleted with their post

Design Decisions:
    - author loaded with selectin: every post projection embeds its author
    - comments not eager-loaded: listings only need a count, detail loads them explicitly
"""

from datetime import datetime, timezone

from sqlalchemy import String, Text, Integer, Boolean, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog.db.base import Base
from blog.db.types import UTCDateTime


class Post(Base):
    """Post entity — title and free-text content by one author."""
    __tablename__ = "posts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    published: Mapped[bool] = mapped_column(
        Boolean, nullable=False, default=False,
    )
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False, index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
        index=True,
    )

    author: Mapped["User"] = relationship(
        "User", back_populates="posts", lazy="selectin",
    )
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="post",
        cascade="all, delete-orphan", order_by="Comment.created_at",
    )
