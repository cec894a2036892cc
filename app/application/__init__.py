"""Application layer: DTOs, interfaces, services.

Depends only on domain and protocol definitions (DIP).
Infrastructure implements the interfaces (repositories).
"""

from app.application.interfaces import IDashboardUserRepository, IDashboardUserService
from app.application.services import DashboardUserService

__all__ = [
    "DashboardUserService",
    "IDashboardUserRepository",
    "IDashboardUserService",
]
