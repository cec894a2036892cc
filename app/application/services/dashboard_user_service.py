"""Dashboard user application service: paged listing, lookup, upsert and delete.

Implements IDashboardUserService over an IDashboardUserRepository. Each write
runs in one repository transaction; failures are raised as domain exceptions.

Upsert policy: a blank id inserts with a new CUID; a known id is updated in
place (only non-None fields change); an unknown id is inserted with that id.
"""

from __future__ import annotations

import logging

from app.application.dtos.dashboard_user import (
    DashboardUserDTO,
    DashboardUserQuery,
    DashboardUserResult,
)
from app.application.dtos.pagination import CommonPager
from app.application.interfaces.repositories import IDashboardUserRepository
from app.domain.exceptions import ResourceNotFoundException, ValidationException
from app.shared.utils.generators import RECORD_ID_MAX_LENGTH

logger = logging.getLogger(__name__)

RESOURCE_TYPE = "dashboard user"


def _normalize_id(user_id: str | None) -> str | None:
    """Stripped id, or None when blank."""
    if user_id is None or not user_id.strip():
        return None
    return user_id.strip()


def _require_id(user_id: str | None) -> str:
    key = _normalize_id(user_id)
    if key is None:
        raise ValidationException("Dashboard user id is required", field="id")
    return key


def _check_new_id(key: str | None) -> None:
    """A caller-supplied id for a new record must fit the id column."""
    if key is not None and len(key) > RECORD_ID_MAX_LENGTH:
        raise ValidationException(
            f"Dashboard user id must be at most {RECORD_ID_MAX_LENGTH} characters",
            field="id",
        )


class DashboardUserService:
    """Dashboard user use cases (list, find, create-or-update, delete)."""

    def __init__(self, user_repo: IDashboardUserRepository) -> None:
        self._user_repo = user_repo

    async def list_by_page(
        self, query: DashboardUserQuery
    ) -> CommonPager[DashboardUserResult]:
        """Return one page and the true total; a page past the end is empty, not an error."""
        total = await self._user_repo.count_by_query(query)
        rows: list[DashboardUserResult] = []
        if total > query.page.offset:
            rows = await self._user_repo.find_page(query)
        return CommonPager.of(query.page, total, rows)

    async def find_by_id(self, user_id: str) -> DashboardUserResult:
        """Raises ValidationException for a blank id, ResourceNotFoundException when absent."""
        key = _require_id(user_id)
        user = await self._user_repo.find_result_by_id(key)
        if user is None:
            raise ResourceNotFoundException(RESOURCE_TYPE, key)
        return user

    async def create_or_update(self, data: DashboardUserDTO) -> int:
        """Insert or update keyed on data.id; return rows affected (1)."""
        if data is None:
            raise ValidationException("Dashboard user payload is required")
        if data.user_name is not None and not data.user_name.strip():
            raise ValidationException("userName must not be blank", field="userName")
        key = _normalize_id(data.id)
        async with self._user_repo.transaction():
            if key is not None:
                updated = await self._user_repo.update_fields(data.with_id(key))
                if updated:
                    logger.info("Updated dashboard user %s", key)
                    return updated
            if data.user_name is None:
                raise ValidationException("userName is required", field="userName")
            _check_new_id(key)
            created = await self._user_repo.insert(data.with_id(key))
        logger.info("Created dashboard user %s (%s)", created.id, created.user_name)
        return 1

    async def delete(self, user_id: str) -> int:
        """Idempotent: deleting an absent id returns 0."""
        key = _require_id(user_id)
        async with self._user_repo.transaction():
            deleted = await self._user_repo.delete_by_id(key)
        if deleted:
            logger.info("Deleted dashboard user %s", key)
        return deleted
