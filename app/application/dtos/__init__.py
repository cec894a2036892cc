"""Application DTOs (no ORM dependency)."""

from app.application.dtos.dashboard_user import (
    DashboardUserDTO,
    DashboardUserQuery,
    DashboardUserResult,
)
from app.application.dtos.pagination import CommonPager, PageMeta, PageParameter

__all__ = [
    "CommonPager",
    "DashboardUserDTO",
    "DashboardUserQuery",
    "DashboardUserResult",
    "PageMeta",
    "PageParameter",
]
