"""Pagination DTOs: page request normalization, page metadata, and the generic pager.

PageParameter never rejects out-of-range input; null or non-positive values
fall back to defaults and oversize page sizes are clamped.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

DEFAULT_CURRENT_PAGE = 1
DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 1000


@dataclass(frozen=True)
class PageParameter:
    """Normalized page request: 1-based current_page and page_size."""

    current_page: int = DEFAULT_CURRENT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @classmethod
    def of(
        cls,
        current_page: int | None = None,
        page_size: int | None = None,
        *,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int = MAX_PAGE_SIZE,
    ) -> PageParameter:
        """Build a PageParameter from raw (possibly None, zero or negative) input."""
        current = current_page if current_page and current_page > 0 else DEFAULT_CURRENT_PAGE
        size = page_size if page_size and page_size > 0 else default_page_size
        return cls(current_page=current, page_size=min(size, max_page_size))

    @property
    def offset(self) -> int:
        """Rows to skip before this page."""
        return (self.current_page - 1) * self.page_size

    @property
    def limit(self) -> int:
        """Maximum rows on this page."""
        return self.page_size


@dataclass(frozen=True)
class PageMeta:
    """Page metadata echoed back with every listing (current, size, total, total_pages)."""

    current: int
    size: int
    total: int
    total_pages: int

    @classmethod
    def build(cls, page: PageParameter, total: int) -> PageMeta:
        return cls(
            current=page.current_page,
            size=page.page_size,
            total=total,
            total_pages=math.ceil(total / page.page_size) if total > 0 else 0,
        )


@dataclass(frozen=True)
class CommonPager[T]:
    """One page of results plus its metadata. Built fresh per query, never mutated."""

    page: PageMeta
    data_list: tuple[T, ...] = field(default_factory=tuple)

    @classmethod
    def of(cls, page: PageParameter, total: int, rows: list[T]) -> CommonPager[T]:
        return cls(page=PageMeta.build(page, total), data_list=tuple(rows))
