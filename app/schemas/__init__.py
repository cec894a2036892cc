"""Pydantic request/response schemas for the API."""

from app.schemas.dashboard_user import (
    CommonPagerResponse,
    DashboardUserCreateRequest,
    DashboardUserResponse,
    DashboardUserUpdateRequest,
    PageMetaResponse,
)
from app.schemas.health import HealthResponse, ReadinessResponse
from app.schemas.result import ResultEnvelope

__all__ = [
    "CommonPagerResponse",
    "DashboardUserCreateRequest",
    "DashboardUserResponse",
    "DashboardUserUpdateRequest",
    "HealthResponse",
    "PageMetaResponse",
    "ReadinessResponse",
    "ResultEnvelope",
]
