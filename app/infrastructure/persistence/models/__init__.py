"""ORM models. Importing this package registers every mapper on Base.metadata."""

from app.infrastructure.persistence.models.dashboard_user import DashboardUser

__all__ = ["DashboardUser"]
