"""Repository interfaces (ports) for the application layer.

Protocols define contracts that infrastructure implementations must fulfill (DIP).
All types reference application DTOs only; no infrastructure imports.
"""

from __future__ import annotations

from contextlib import AbstractAsyncContextManager
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.dashboard_user import (
        DashboardUserDTO,
        DashboardUserQuery,
        DashboardUserResult,
    )


class IDashboardUserRepository(Protocol):
    """Protocol for dashboard user persistence (DIP)."""

    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Commit on clean exit, roll back and re-raise on error."""

    async def count_by_query(self, query: DashboardUserQuery) -> int:
        """Return number of rows matching the query filter (ignores paging)."""

    async def find_page(self, query: DashboardUserQuery) -> list[DashboardUserResult]:
        """Return the rows of the requested page (may be empty)."""

    async def find_result_by_id(self, user_id: str) -> DashboardUserResult | None:
        """Return dashboard user by id, or None."""

    async def insert(self, data: DashboardUserDTO) -> DashboardUserResult:
        """Insert a record; data.id is used when set, otherwise a CUID is assigned."""

    async def update_fields(self, data: DashboardUserDTO) -> int:
        """Overwrite the non-None fields of the record data.id; return rows affected."""

    async def delete_by_id(self, user_id: str) -> int:
        """Delete by id; return rows affected (0 when absent)."""
