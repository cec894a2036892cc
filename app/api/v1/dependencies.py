"""Presentation-layer dependency injection (composition root).

Provides FastAPI Depends() for DB sessions, repositories and services.
Routes depend only on these providers, not on infrastructure directly;
tests swap implementations through app.dependency_overrides.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.application.interfaces.services import IDashboardUserService
from app.application.services.dashboard_user_service import DashboardUserService
from app.infrastructure.persistence.database import get_db
from app.infrastructure.persistence.repositories import DashboardUserRepository


async def get_dashboard_user_repo(
    db: Annotated[AsyncSession, Depends(get_db)],
) -> DashboardUserRepository:
    """Dashboard user repository bound to the request session."""
    return DashboardUserRepository(db)


async def get_dashboard_user_service(
    user_repo: Annotated[DashboardUserRepository, Depends(get_dashboard_user_repo)],
) -> IDashboardUserService:
    """Dashboard user service for all five dashboard user routes."""
    return DashboardUserService(user_repo)
