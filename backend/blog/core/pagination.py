"""Pagination — pure page arithmetic for post listings.

Invariants:
    - Page numbers are 1-based
    - skip = (page - 1) * limit
    - pages = ceil(total / limit); total == 0 gives pages == 0
    - Page or limit below 1 never reaches the query (normalized first)
    - Large page/limit values are accepted; skip and row_limit are clamped to
      a signed 64-bit integer so the driver can bind them
"""

from dataclasses import dataclass

from blog.core.domain_types import DEFAULT_LIMIT, DEFAULT_PAGE

MAX_SQL_INT = 2**63 - 1


@dataclass(frozen=True)
class PageRequest:
    """A normalized page/limit pair."""
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def normalize(cls, page: int, limit: int) -> "PageRequest":
        return cls(
            page=page if page >= 1 else DEFAULT_PAGE,
            limit=limit if limit >= 1 else DEFAULT_LIMIT,
        )

    @property
    def skip(self) -> int:
        return min((self.page - 1) * self.limit, MAX_SQL_INT)

    @property
    def row_limit(self) -> int:
        """limit as bound into the query."""
        return min(self.limit, MAX_SQL_INT)


def count_pages(total: int, limit: int) -> int:
    """Number of pages needed for total rows at limit rows per page."""
    if total <= 0:
        return 0
    return -(-total // limit)


def build_pagination(total: int, request: PageRequest) -> dict:
    """Pagination block returned alongside a page of results."""
    return {
        "total": total,
        "pages": count_pages(total, request.limit),
        "page": request.page,
        "limit": request.limit,
    }
