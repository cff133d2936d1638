"""User ORM — a registered author.

Invariants:
    - email is unique at the database level (unique index ix_users_email)
    - password holds a bcrypt hash, never plain text
    - users are never deleted
"""

from datetime import datetime, timezone

from sqlalchemy import String, Integer
from sqlalchemy.orm import Mapped, mapped_column, relationship

from blog.db.base import Base
from blog.db.types import UTCDateTime


class User(Base):
    """Registered user — owns posts and comments."""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, unique=True, index=True,
    )
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(),
        nullable=False,
        default=lambda: datetime.now(timezone.utc),
    )

    posts: Mapped[list["Post"]] = relationship(
        "Post", back_populates="author",
    )
    comments: Mapped[list["Comment"]] = relationship(
        "Comment", back_populates="author",
    )
