"""Application services (use cases over repository protocols)."""

from app.application.services.dashboard_user_service import DashboardUserService

__all__ = ["DashboardUserService"]
