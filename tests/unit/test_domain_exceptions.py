"""Tests for domain exceptions (error_code, message, details)."""

from app.domain.exceptions import (
    AdminException,
    ResourceNotFoundException,
    UserNameAlreadyExistsException,
    ValidationException,
)


def test_admin_exception_default_error_code() -> None:
    """Base AdminException uses class name as error_code when not provided."""
    exc = AdminException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "AdminException"
    assert exc.details == {}
    assert str(exc) == "Something failed"


def test_admin_exception_custom_error_code_and_details() -> None:
    exc = AdminException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.to_dict() == {
        "error": "CUSTOM",
        "message": "Oops",
        "details": {"key": "value"},
    }


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="userName")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "userName"}


def test_validation_exception_without_field() -> None:
    exc = ValidationException("Invalid")
    assert exc.details == {}


def test_resource_not_found_exception() -> None:
    exc = ResourceNotFoundException("dashboard user", "u1")
    assert exc.message == "dashboard user not found: u1"
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "dashboard user", "resource_id": "u1"}


def test_user_name_already_exists_exception() -> None:
    exc = UserNameAlreadyExistsException("alice")
    assert "alice" in exc.message
    assert exc.error_code == "USER_NAME_ALREADY_EXISTS"
    assert isinstance(exc, AdminException)
