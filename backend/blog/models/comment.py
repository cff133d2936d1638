"""Comment ORM — a reader's reply attached to exactly one post.

Invariants:
    - post_id and author_id are both non-nullable FKs
    - Deleted when the owning post is deleted (ON DELETE CASCADE)
"""

from datetime import datetime, timezone

from sqlalchemy import Text, Integer, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog.db.base import Base
from blog.db.types import UTCDateTime


class Comment(Base):
    """Comment entity."""
    __tablename__ = "comments"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    content: Mapped[str] = mapped_column(Text, nullable=False)
    post_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("posts.id", ondelete="CASCADE"),
        nullable=False, index=True,
    )
    author_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id"), nullable=False,
    )
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    post: Mapped["Post"] = relationship("Post", back_populates="comments")
    author: Mapped["User"] = relationship(
        "User", back_populates="comments", lazy="selectin",
    )
