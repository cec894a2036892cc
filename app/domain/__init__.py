"""Domain layer: exceptions.

No dependencies on infrastructure or presentation. Used by application
and infrastructure layers.
"""

from app.domain.exceptions import (
    AdminException,
    ResourceNotFoundException,
    UserNameAlreadyExistsException,
    ValidationException,
)

__all__ = [
    "AdminException",
    "ResourceNotFoundException",
    "UserNameAlreadyExistsException",
    "ValidationException",
]
