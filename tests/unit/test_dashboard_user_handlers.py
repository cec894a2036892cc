"""Route functions called directly with a stub service (message mapping, id handling)."""

import logging

from app.api.v1.endpoints import dashboard_users as routes
from app.application.dtos.dashboard_user import DashboardUserDTO
from app.core.exception_handlers import INTERNAL_ERROR_MESSAGE, _generic_exception_handler
from app.domain.exceptions import ResourceNotFoundException
from app.schemas.dashboard_user import DashboardUserCreateRequest, DashboardUserUpdateRequest
from app.shared.enums import ResultStatus


class StubService:
    """Records calls; raises `fail` from every method when set."""

    def __init__(self, fail: Exception | None = None) -> None:
        self.fail = fail
        self.saved: list[DashboardUserDTO] = []

    async def list_by_page(self, query):
        raise self.fail or NotImplementedError

    async def find_by_id(self, user_id):
        raise self.fail or ResourceNotFoundException("dashboard user", user_id)

    async def create_or_update(self, data):
        if self.fail:
            raise self.fail
        self.saved.append(data)
        return 1

    async def delete(self, user_id):
        if self.fail:
            raise self.fail
        return 0


async def test_unexpected_failure_returns_fixed_message_and_logs(caplog) -> None:
    service = StubService(fail=RuntimeError("connection reset"))
    with caplog.at_level(logging.ERROR, logger=routes.__name__):
        envelope = await routes.delete_dashboard_user("u1", service)
    assert envelope.status is ResultStatus.ERROR
    assert envelope.message == "delete dashboard user exception"
    assert envelope.data is None
    assert "connection reset" in caplog.text


async def test_not_found_returns_domain_message() -> None:
    envelope = await routes.detail_dashboard_user("missing", StubService())
    assert envelope.status is ResultStatus.ERROR
    assert envelope.message == "dashboard user not found: missing"


async def test_create_passes_no_id() -> None:
    service = StubService()
    body = DashboardUserCreateRequest.model_validate({"userName": "alice", "role": 2})
    envelope = await routes.create_dashboard_user(body, service)
    assert envelope.status is ResultStatus.SUCCESS
    assert envelope.message == "create dashboard user success"
    assert envelope.data == 1
    assert service.saved[0].id is None
    assert service.saved[0].role == 2


async def test_update_path_id_wins_over_body_id() -> None:
    service = StubService()
    body = DashboardUserUpdateRequest.model_validate({"id": "other", "enabled": False})
    envelope = await routes.update_dashboard_user("u1", service, body)
    assert envelope.message == "update dashboard user success"
    assert service.saved[0].id == "u1"
    assert service.saved[0].enabled is False


async def test_update_without_body_is_error() -> None:
    service = StubService()
    envelope = await routes.update_dashboard_user("u1", service, None)
    assert envelope.status is ResultStatus.ERROR
    assert service.saved == []


async def test_delete_absent_is_success_with_zero() -> None:
    envelope = await routes.delete_dashboard_user("u1", StubService())
    assert envelope.status is ResultStatus.SUCCESS
    assert envelope.data == 0


async def test_generic_handler_hides_detail() -> None:
    response = _generic_exception_handler(None, RuntimeError("secret"))  # type: ignore[arg-type]
    assert response.status_code == 200
    assert b'"status":"ERROR"' in response.body
    assert INTERNAL_ERROR_MESSAGE.encode() in response.body
    assert b"secret" not in response.body
