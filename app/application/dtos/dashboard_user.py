"""DTOs for dashboard user use cases (no dependency on ORM)."""

from dataclasses import dataclass, replace
from datetime import datetime

from app.application.dtos.pagination import PageParameter


@dataclass(frozen=True)
class DashboardUserQuery:
    """Listing request: optional user_name substring filter plus page.

    A blank or whitespace-only user_name means "match all".
    """

    user_name: str | None = None
    page: PageParameter = PageParameter()

    @property
    def user_name_filter(self) -> str | None:
        """Stripped filter value, or None when the listing is unfiltered."""
        if self.user_name is None:
            return None
        stripped = self.user_name.strip()
        return stripped or None


@dataclass(frozen=True)
class DashboardUserDTO:
    """Create-or-update input. id is None (or blank) for a new record.

    Fields left as None are not touched on update.
    """

    id: str | None = None
    user_name: str | None = None
    password: str | None = None
    role: int | None = None
    enabled: bool | None = None

    def with_id(self, user_id: str | None) -> "DashboardUserDTO":
        """Return a copy whose id is user_id (path id wins over body id)."""
        return replace(self, id=user_id)


@dataclass(frozen=True)
class DashboardUserResult:
    """Dashboard user read-model (result of find_by_id and list_by_page)."""

    id: str
    user_name: str
    password: str | None
    role: int
    enabled: bool
    created_at: datetime | None
    updated_at: datetime | None
