"""Domain exceptions for the dashboard admin application.

Defines domain-level exceptions that represent business rule violations.
These exceptions are independent of infrastructure concerns. The handler
layer maps them to ERROR result envelopes carrying their message.
"""

from typing import Any


class AdminException(Exception):
    """Base exception for all dashboard admin errors.

    All custom exceptions should inherit from this class to allow
    consistent error handling and logging. The handler layer renders
    these as ERROR envelopes using message; error_code and details are
    kept for logs and to_dict().

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. field, resource_id).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-serializable view (error code, message, details)."""
        return {
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationException(AdminException):
    """Raised when input validation fails (e.g. missing payload or blank id)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class ResourceNotFoundException(AdminException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'dashboard user').
            resource_id: The ID that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class UserNameAlreadyExistsException(AdminException):
    """Raised when creating or renaming a dashboard user to a taken user name."""

    def __init__(self, user_name: str) -> None:
        super().__init__(
            f"Dashboard user name already exists: {user_name}",
            "USER_NAME_ALREADY_EXISTS",
            {"user_name": user_name},
        )
