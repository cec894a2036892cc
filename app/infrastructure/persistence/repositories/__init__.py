"""SQLAlchemy repositories. Each implements an application repository protocol."""

from app.infrastructure.persistence.repositories.base import BaseRepository
from app.infrastructure.persistence.repositories.dashboard_user_repo import (
    DashboardUserRepository,
)

__all__ = [
    "BaseRepository",
    "DashboardUserRepository",
]
