"""Application interfaces (ports): repository and service protocols.

Define contracts for infrastructure implementations (DIP).
No runtime imports from app.infrastructure or app.api.
"""

from app.application.interfaces.repositories import IDashboardUserRepository
from app.application.interfaces.services import IDashboardUserService

__all__ = [
    "IDashboardUserRepository",
    "IDashboardUserService",
]
