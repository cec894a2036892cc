"""Service interfaces (ports) for the application layer.

Protocols define contracts for application services (DIP).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from app.application.dtos.dashboard_user import (
        DashboardUserDTO,
        DashboardUserQuery,
        DashboardUserResult,
    )
    from app.application.dtos.pagination import CommonPager


class IDashboardUserService(Protocol):
    """Dashboard user operations consumed by the handler layer.

    Failures are raised as domain exceptions (ValidationException,
    ResourceNotFoundException, UserNameAlreadyExistsException); the
    handler layer turns every outcome into a result envelope.
    """

    async def list_by_page(
        self, query: DashboardUserQuery
    ) -> CommonPager[DashboardUserResult]:
        """Return one page of matching users; empty page when nothing matches."""

    async def find_by_id(self, user_id: str) -> DashboardUserResult:
        """Return user by id; raise ResourceNotFoundException when absent."""

    async def create_or_update(self, data: DashboardUserDTO) -> int:
        """Insert (no id or unknown id) or update (known id); return rows affected."""

    async def delete(self, user_id: str) -> int:
        """Delete by id; return 1 when removed, 0 when the id did not exist."""
