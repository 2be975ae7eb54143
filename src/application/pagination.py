import math
from dataclasses import dataclass, field
from typing import Any, Optional

from src.config import DEFAULT_PAGE, DEFAULT_PAGE_LIMIT, MAX_PAGE_LIMIT


@dataclass(frozen=True)
class PageRequest:
    page: int
    limit: int

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit

    @classmethod
    def parse(cls, page: Any = None, limit: Any = None) -> "PageRequest":
        """
        Builds a page request from raw query values.
        Missing or unparseable values fall back to the defaults; page is at
        least 1 and limit is kept within 1..MAX_PAGE_LIMIT.
        """
        page_num = _to_int(page)
        limit_num = _to_int(limit)

        if page_num is None or page_num < 1:
            page_num = DEFAULT_PAGE
        if limit_num is None or limit_num < 1:
            limit_num = DEFAULT_PAGE_LIMIT
        return cls(page=page_num, limit=min(limit_num, MAX_PAGE_LIMIT))


@dataclass
class PagedResult:
    docs: list[dict[str, Any]]
    total_docs: int
    limit: int
    page: int
    total_pages: int
    has_prev_page: bool
    has_next_page: bool
    prev_page: Optional[int] = None
    next_page: Optional[int] = None

    @classmethod
    def build(cls, docs: list[dict[str, Any]], total_docs: int, request: PageRequest) -> "PagedResult":
        total_pages = math.ceil(total_docs / request.limit) if total_docs else 0
        has_prev = request.page > 1
        has_next = request.page < total_pages
        return cls(
            docs=docs,
            total_docs=total_docs,
            limit=request.limit,
            page=request.page,
            total_pages=total_pages,
            has_prev_page=has_prev,
            has_next_page=has_next,
            prev_page=request.page - 1 if has_prev else None,
            next_page=request.page + 1 if has_next else None,
        )


def _to_int(value: Any) -> Optional[int]:
    if value is None or isinstance(value, bool):
        return None
    try:
        return int(str(value).strip())
    except ValueError:
        return None
