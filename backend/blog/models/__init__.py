"""ORM Models — SQLAlchemy declarative models for users, posts and comments.

Invariants:
    - All models inherit from Base (db/base.py)
    - All models imported here so string-based relationship() references
      resolve before any query runs
"""

from blog.models.user import User  # noqa: F401
from blog.models.post import Post  # noqa: F401
from blog.models.comment import Comment  # noqa: F401
