"""DashboardUserRepository and DashboardUserService against an in-memory SQLite database."""

import pytest
from sqlalchemy.exc import IntegrityError

from app.application.dtos.dashboard_user import DashboardUserDTO, DashboardUserQuery
from app.application.dtos.pagination import PageParameter
from app.domain.exceptions import UserNameAlreadyExistsException
from app.infrastructure.persistence.repositories import DashboardUserRepository


async def test_insert_assigns_cuid_and_defaults(user_repo, db_session) -> None:
    created = await user_repo.insert(DashboardUserDTO(user_name="alice", password="pw"))
    await db_session.commit()
    assert created.id
    assert created.role == 1
    assert created.enabled is True
    assert created.password == "pw"
    assert created.created_at is not None
    assert created.created_at.tzinfo is not None


async def test_round_trip_through_service(user_service, user_repo) -> None:
    await user_service.create_or_update(
        DashboardUserDTO(user_name="bob", password="secret", role=3, enabled=False)
    )
    found = await user_repo.get_by_user_name("bob")
    assert found is not None
    loaded = await user_service.find_by_id(found.id)
    assert (loaded.user_name, loaded.password, loaded.role, loaded.enabled) == (
        "bob",
        "secret",
        3,
        False,
    )


async def test_unknown_id_upsert_inserts_with_given_id(user_service) -> None:
    await user_service.create_or_update(DashboardUserDTO(id="fixed-id", user_name="carol"))
    assert (await user_service.find_by_id("fixed-id")).user_name == "carol"


async def test_update_keeps_id_and_unset_fields(user_service, user_repo) -> None:
    await user_service.create_or_update(DashboardUserDTO(id="u1", user_name="dave", role=2))
    await user_service.create_or_update(DashboardUserDTO(id="u1", enabled=False))
    user = await user_service.find_by_id("u1")
    assert user.id == "u1"
    assert user.user_name == "dave"
    assert user.role == 2
    assert user.enabled is False
    assert await user_repo.count() == 1


async def test_duplicate_user_name_rejected(user_service, user_repo) -> None:
    await user_service.create_or_update(DashboardUserDTO(user_name="erin"))
    with pytest.raises(UserNameAlreadyExistsException):
        await user_service.create_or_update(DashboardUserDTO(user_name="erin"))
    # Session is usable after the rollback.
    assert await user_repo.count() == 1


async def test_delete_twice_returns_one_then_zero(user_service) -> None:
    await user_service.create_or_update(DashboardUserDTO(id="gone", user_name="frank"))
    assert await user_service.delete("gone") == 1
    assert await user_service.delete("gone") == 0


async def test_pages_partition_all_rows(user_service) -> None:
    for i in range(25):
        await user_service.create_or_update(DashboardUserDTO(user_name=f"user{i:02d}"))

    seen: list[str] = []
    sizes = []
    for current in (1, 2, 3):
        pager = await user_service.list_by_page(
            DashboardUserQuery(page=PageParameter.of(current, 10))
        )
        assert pager.page.total == 25
        assert pager.page.total_pages == 3
        sizes.append(len(pager.data_list))
        seen.extend(u.id for u in pager.data_list)

    assert sizes == [10, 10, 5]
    assert len(set(seen)) == 25


async def test_substring_filter_treats_wildcards_literally(user_service) -> None:
    for name in ("alice", "malice", "bob", "50%off", "500ff"):
        await user_service.create_or_update(DashboardUserDTO(user_name=name))

    pager = await user_service.list_by_page(DashboardUserQuery(user_name="lic"))
    assert sorted(u.user_name for u in pager.data_list) == ["alice", "malice"]

    pager = await user_service.list_by_page(DashboardUserQuery(user_name="0%"))
    assert [u.user_name for u in pager.data_list] == ["50%off"]


async def test_blank_filter_matches_all(user_service) -> None:
    for name in ("a1", "a2"):
        await user_service.create_or_update(DashboardUserDTO(user_name=name))
    pager = await user_service.list_by_page(DashboardUserQuery(user_name="   "))
    assert pager.page.total == 2


async def test_id_collision_is_not_reported_as_duplicate_name(session_factory) -> None:
    """Only the user_name unique key maps to UserNameAlreadyExistsException."""
    async with session_factory() as first:
        await DashboardUserRepository(first).insert(
            DashboardUserDTO(id="same-id", user_name="gina")
        )
        await first.commit()

    async with session_factory() as second:
        with pytest.raises(IntegrityError) as exc_info:
            await DashboardUserRepository(second).insert(
                DashboardUserDTO(id="same-id", user_name="hank")
            )
        assert not isinstance(exc_info.value, UserNameAlreadyExistsException)
        await second.rollback()


async def test_duplicate_name_on_rename_is_reported(user_service) -> None:
    await user_service.create_or_update(DashboardUserDTO(id="u1", user_name="ivy"))
    await user_service.create_or_update(DashboardUserDTO(id="u2", user_name="jack"))
    with pytest.raises(UserNameAlreadyExistsException):
        await user_service.create_or_update(DashboardUserDTO(id="u2", user_name="ivy"))
