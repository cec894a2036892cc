"""Tests for DashboardUserQuery and DashboardUserDTO."""

from dataclasses import FrozenInstanceError

import pytest

from app.application.dtos.dashboard_user import DashboardUserDTO, DashboardUserQuery
from app.application.dtos.pagination import PageParameter


class TestDashboardUserQuery:
    def test_absent_user_name_matches_all(self) -> None:
        assert DashboardUserQuery().user_name_filter is None

    @pytest.mark.parametrize("blank", ["", "   ", "\t"])
    def test_blank_user_name_matches_all(self, blank: str) -> None:
        assert DashboardUserQuery(user_name=blank).user_name_filter is None

    def test_user_name_is_stripped(self) -> None:
        assert DashboardUserQuery(user_name="  ali ").user_name_filter == "ali"

    def test_default_page(self) -> None:
        assert DashboardUserQuery().page == PageParameter()

    def test_is_read_only(self) -> None:
        query = DashboardUserQuery(user_name="a")
        with pytest.raises(FrozenInstanceError):
            query.user_name = "b"  # type: ignore[misc]


class TestDashboardUserDTO:
    def test_with_id_replaces_id_only(self) -> None:
        dto = DashboardUserDTO(id="other", user_name="bob", role=2)
        moved = dto.with_id("u1")
        assert moved.id == "u1"
        assert moved.user_name == "bob"
        assert moved.role == 2
        assert dto.id == "other"
