"""Dashboard user repository. Interface methods return application DTOs."""

from __future__ import annotations

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from app.application.dtos.dashboard_user import (
    DashboardUserDTO,
    DashboardUserQuery,
    DashboardUserResult,
)
from app.domain.exceptions import UserNameAlreadyExistsException
from app.infrastructure.persistence.models.dashboard_user import (
    USER_NAME_CONSTRAINT,
    DashboardUser,
)
from app.infrastructure.persistence.repositories.base import BaseRepository
from app.shared.utils.datetime import ensure_utc

# Fields copied from DashboardUserDTO on insert and partial update (same names on the model)
_UPDATABLE_FIELDS = ("user_name", "password", "role", "enabled")


def _to_result(u: DashboardUser) -> DashboardUserResult:
    """Map ORM DashboardUser to application DashboardUserResult."""
    return DashboardUserResult(
        id=u.id,
        user_name=u.user_name,
        password=u.password,
        role=u.role,
        enabled=u.enabled,
        created_at=ensure_utc(u.created_at),
        updated_at=ensure_utc(u.updated_at),
    )


def _is_user_name_conflict(exc: IntegrityError) -> bool:
    """True when the violated constraint is the user_name unique key.

    PostgreSQL reports the constraint name; SQLite reports table.column.
    """
    detail = str(exc.orig)
    return USER_NAME_CONSTRAINT in detail or "dashboard_user.user_name" in detail


def _query_criteria(query: DashboardUserQuery) -> list[ColumnElement[bool]]:
    """WHERE clauses for a listing: substring match on user_name when filtered."""
    name = query.user_name_filter
    if name is None:
        return []
    return [DashboardUser.user_name.contains(name, autoescape=True)]


class DashboardUserRepository(BaseRepository[DashboardUser]):
    """Dashboard user repository: paged search, insert, partial update, delete."""

    def __init__(self, db: AsyncSession) -> None:
        super().__init__(db, DashboardUser)

    async def count_by_query(self, query: DashboardUserQuery) -> int:
        return await self.count(*_query_criteria(query))

    async def find_page(self, query: DashboardUserQuery) -> list[DashboardUserResult]:
        """Newest first; id breaks ties so pages never overlap."""
        result = await self.db.execute(
            select(DashboardUser)
            .where(*_query_criteria(query))
            .order_by(DashboardUser.created_at.desc(), DashboardUser.id.asc())
            .offset(query.page.offset)
            .limit(query.page.limit)
        )
        return [_to_result(u) for u in result.scalars().all()]

    async def find_result_by_id(self, user_id: str) -> DashboardUserResult | None:
        user = await self.get_by_id(user_id)
        return _to_result(user) if user else None

    async def get_by_user_name(self, user_name: str) -> DashboardUserResult | None:
        result = await self.db.execute(
            select(DashboardUser).where(DashboardUser.user_name == user_name)
        )
        user = result.scalar_one_or_none()
        return _to_result(user) if user else None

    async def insert(self, data: DashboardUserDTO) -> DashboardUserResult:
        """Insert; a taken user_name raises UserNameAlreadyExistsException."""
        values = {
            name: getattr(data, name)
            for name in _UPDATABLE_FIELDS
            if getattr(data, name) is not None
        }
        if data.id:
            values["id"] = data.id
        try:
            created = await self.create(DashboardUser(**values))
        except IntegrityError as exc:
            if _is_user_name_conflict(exc):
                raise UserNameAlreadyExistsException(data.user_name or "") from exc
            raise
        return _to_result(created)

    async def update_fields(self, data: DashboardUserDTO) -> int:
        """Overwrite non-None fields of record data.id; 0 when the record is absent."""
        if not data.id:
            return 0
        user = await self.get_by_id(data.id)
        if user is None:
            return 0
        for name in _UPDATABLE_FIELDS:
            value = getattr(data, name)
            if value is not None:
                setattr(user, name, value)
        try:
            await self.update(user)
        except IntegrityError as exc:
            if _is_user_name_conflict(exc):
                raise UserNameAlreadyExistsException(data.user_name or "") from exc
            raise
        return 1

    async def delete_by_id(self, user_id: str) -> int:
        result = await self.db.execute(
            delete(DashboardUser).where(DashboardUser.id == user_id)
        )
        await self.db.flush()
        return result.rowcount or 0
