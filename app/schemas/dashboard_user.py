"""Dashboard user API schemas. Wire names are camelCase (userName, dateCreated, dataList)."""

from datetime import datetime
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from app.application.dtos.dashboard_user import DashboardUserDTO, DashboardUserResult
from app.application.dtos.pagination import CommonPager, PageMeta

T = TypeVar("T")

_CAMEL = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DashboardUserCreateRequest(BaseModel):
    """Request body for POST /dashboardUser. An id in the body is ignored."""

    model_config = _CAMEL

    user_name: str = Field(..., min_length=1, max_length=64)
    password: str | None = Field(default=None, max_length=128)
    role: int | None = None
    enabled: bool | None = None

    def to_dto(self) -> DashboardUserDTO:
        return DashboardUserDTO(
            user_name=self.user_name,
            password=self.password,
            role=self.role,
            enabled=self.enabled,
        )


class DashboardUserUpdateRequest(BaseModel):
    """Request body for PUT /dashboardUser/{id} (partial: omitted fields are kept).

    id is accepted for compatibility but always replaced by the path id.
    """

    model_config = _CAMEL

    id: str | None = None
    user_name: str | None = Field(default=None, min_length=1, max_length=64)
    password: str | None = Field(default=None, max_length=128)
    role: int | None = None
    enabled: bool | None = None

    def to_dto(self) -> DashboardUserDTO:
        return DashboardUserDTO(
            id=self.id,
            user_name=self.user_name,
            password=self.password,
            role=self.role,
            enabled=self.enabled,
        )


class DashboardUserResponse(BaseModel):
    """Dashboard user as returned by detail and list."""

    model_config = _CAMEL

    id: str
    user_name: str
    password: str | None = None
    role: int
    enabled: bool
    date_created: datetime | None = None
    date_updated: datetime | None = None

    @classmethod
    def from_result(cls, user: DashboardUserResult) -> "DashboardUserResponse":
        return cls(
            id=user.id,
            user_name=user.user_name,
            password=user.password,
            role=user.role,
            enabled=user.enabled,
            date_created=user.created_at,
            date_updated=user.updated_at,
        )


class PageMetaResponse(BaseModel):
    """Page metadata: current, size, total, totalPages."""

    model_config = _CAMEL

    current: int
    size: int
    total: int
    total_pages: int

    @classmethod
    def from_meta(cls, meta: PageMeta) -> "PageMetaResponse":
        return cls(
            current=meta.current,
            size=meta.size,
            total=meta.total,
            total_pages=meta.total_pages,
        )


class CommonPagerResponse(BaseModel, Generic[T]):
    """One page of items with its metadata."""

    model_config = _CAMEL

    page: PageMetaResponse
    data_list: list[T] = Field(default_factory=list)


def dashboard_user_pager(
    pager: CommonPager[DashboardUserResult],
) -> CommonPagerResponse[DashboardUserResponse]:
    """Convert an application pager of users into its wire model."""
    return CommonPagerResponse[DashboardUserResponse](
        page=PageMetaResponse.from_meta(pager.page),
        data_list=[DashboardUserResponse.from_result(u) for u in pager.data_list],
    )
