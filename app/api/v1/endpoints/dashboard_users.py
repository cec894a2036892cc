"""Dashboard user API: list, detail, create, update, delete.

Every route answers HTTP 200 with a ResultEnvelope. Domain failures
(not found, validation, duplicate user name) are returned with their own
message; any other failure is logged here and replaced by the route's
fixed failure message.
"""

import logging
from collections.abc import Awaitable, Callable
from typing import Annotated, Any, TypeVar

from fastapi import APIRouter, Body, Depends, Query

from app.api.v1.dependencies import get_dashboard_user_service
from app.application.dtos.dashboard_user import DashboardUserQuery
from app.application.dtos.pagination import PageParameter
from app.application.interfaces.services import IDashboardUserService
from app.core.config import get_settings
from app.domain.exceptions import AdminException, ValidationException
from app.schemas.dashboard_user import (
    DashboardUserCreateRequest,
    DashboardUserResponse,
    DashboardUserUpdateRequest,
    dashboard_user_pager,
)
from app.schemas.result import ResultEnvelope, error, success

logger = logging.getLogger(__name__)

router = APIRouter()

T = TypeVar("T")

Service = Annotated[IDashboardUserService, Depends(get_dashboard_user_service)]


async def _dispatch(
    action: Callable[[], Awaitable[T]],
    success_message: str,
    failure_message: str,
    render: Callable[[T], Any] = lambda value: value,
) -> ResultEnvelope:
    """Run action and wrap its value, or the failure it raised, in an envelope."""
    try:
        value = await action()
    except AdminException as exc:
        logger.info("%s: %s [%s]", failure_message, exc.message, exc.error_code)
        return error(exc.message)
    except Exception:
        logger.exception(failure_message)
        return error(failure_message)
    return success(success_message, render(value))


@router.get("", response_model=ResultEnvelope)
async def query_dashboard_users(
    service: Service,
    user_name: Annotated[str | None, Query(alias="userName")] = None,
    current_page: Annotated[int | None, Query(alias="currentPage")] = None,
    page_size: Annotated[int | None, Query(alias="pageSize")] = None,
) -> ResultEnvelope:
    """Paged listing; userName filters by substring, blank means all."""
    settings = get_settings()
    query = DashboardUserQuery(
        user_name=user_name,
        page=PageParameter.of(
            current_page,
            page_size,
            default_page_size=settings.default_page_size,
            max_page_size=settings.max_page_size,
        ),
    )
    return await _dispatch(
        lambda: service.list_by_page(query),
        "query dashboard users success",
        "query dashboard users exception",
        dashboard_user_pager,
    )


@router.get("/{id}", response_model=ResultEnvelope)
async def detail_dashboard_user(id: str, service: Service) -> ResultEnvelope:
    return await _dispatch(
        lambda: service.find_by_id(id),
        "detail dashboard user success",
        "detail dashboard user exception",
        DashboardUserResponse.from_result,
    )


@router.post("", response_model=ResultEnvelope)
async def create_dashboard_user(
    body: DashboardUserCreateRequest, service: Service
) -> ResultEnvelope:
    """Always inserts; the create body has no id."""
    return await _dispatch(
        lambda: service.create_or_update(body.to_dto()),
        "create dashboard user success",
        "create dashboard user exception",
    )


@router.put("/{id}", response_model=ResultEnvelope)
async def update_dashboard_user(
    id: str,
    service: Service,
    body: Annotated[DashboardUserUpdateRequest | None, Body()] = None,
) -> ResultEnvelope:
    """Path id overrides any id in the body. Unknown id inserts a record with that id."""

    async def _update() -> int:
        if body is None:
            raise ValidationException("Dashboard user payload is required")
        return await service.create_or_update(body.to_dto().with_id(id))

    return await _dispatch(
        _update,
        "update dashboard user success",
        "update dashboard user exception",
    )


@router.delete("/{id}", response_model=ResultEnvelope)
async def delete_dashboard_user(id: str, service: Service) -> ResultEnvelope:
    """Idempotent: data is 0 when the id did not exist."""
    return await _dispatch(
        lambda: service.delete(id),
        "delete dashboard user success",
        "delete dashboard user exception",
    )
