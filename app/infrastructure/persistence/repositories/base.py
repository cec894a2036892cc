"""Base repository: generic CRUD, counting, and the write transaction scope."""

from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql.elements import ColumnElement

from app.infrastructure.persistence.database import Base


class BaseRepository[ModelType: Base]:
    """Base repository with get_by_id, create, update, count and transaction.

    Writes only flush; the caller decides when to commit by wrapping a unit of
    work in transaction(). Flushing inside the scope surfaces constraint
    violations where the caller can still translate them.
    """

    def __init__(self, db: AsyncSession, model: type[ModelType]) -> None:
        self.db = db
        self.model = model

    @asynccontextmanager
    async def transaction(self) -> AsyncIterator[None]:
        """Commit on clean exit; roll back and re-raise on any exception."""
        try:
            yield
            await self.db.commit()
        except Exception:
            await self.db.rollback()
            raise

    async def get_by_id(self, entity_id: str) -> ModelType | None:
        """Return a single record by primary key, or None."""
        model: Any = self.model
        result = await self.db.execute(select(self.model).where(model.id == entity_id))
        return result.scalar_one_or_none()

    async def count(self, *criteria: ColumnElement[bool]) -> int:
        """Return number of records matching all criteria (all records when none given)."""
        stmt = select(func.count()).select_from(self.model)
        if criteria:
            stmt = stmt.where(*criteria)
        result = await self.db.execute(stmt)
        return int(result.scalar_one())

    async def create(self, obj: ModelType) -> ModelType:
        """Persist a new record (flush + refresh so server defaults are loaded)."""
        self.db.add(obj)
        await self.db.flush()
        await self.db.refresh(obj)
        return obj

    async def update(self, obj: ModelType) -> ModelType:
        """Flush changes on a record loaded in this session and reload server-side values.

        Raises ValueError when obj is not attached to this session (load it with
        get_by_id first).
        """
        if obj not in self.db:
            raise ValueError(
                f"Cannot update: {self.model.__name__} instance is not attached to this session."
            )
        await self.db.flush()
        await self.db.refresh(obj)
        return obj
