"""Domain Types — identity types and the public projections shared across layers.

Invariants:
    - UserId, PostId, CommentId wrap integer primary keys
    - Storage keys for the client session are fixed strings

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
"""

from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
PostId = NewType("PostId", int)
CommentId = NewType("CommentId", int)


# ─── Client Session Keys ─────────────────────────────────────────

AUTH_TOKEN_KEY = "auth_token"
USER_KEY = "user"


# ─── Pagination Defaults ─────────────────────────────────────────

DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10
