import pytest

from app.domain.models.user import PaginationOptions, UserFilters, UserUpdate
from app.domain.repositories.exceptions import InternalRepositoryError, NotFoundError

pytestmark = pytest.mark.anyio


async def test_create_and_get_by_id_round_trip(repository, build_user_input) -> None:
    data = build_user_input("alice@example.com")

    user_id = await repository.create(data)
    assert user_id

    user = await repository.get_by_id(user_id)
    assert user.id == user_id
    assert user.password is None
    expected = data.model_dump(exclude={"password"})
    assert user.model_dump(exclude={"id", "password"}) == expected


async def test_password_only_returned_by_credential_lookup(repository, build_user_input) -> None:
    await repository.create(build_user_input("bob@example.com"))

    user = await repository.get_by_email("bob@example.com")
    credential = await repository.get_credential_by_email("bob@example.com")

    assert user.password is None
    assert credential.password == "hashed-password"
    assert credential.id == user.id


async def test_create_duplicate_email_returns_none(repository, build_user_input) -> None:
    first_id = await repository.create(build_user_input("dup@example.com", name="First"))

    second_id = await repository.create(build_user_input("dup@example.com", name="Second"))

    assert second_id is None
    existing = await repository.get_by_id(first_id)
    assert existing.name == "First"
    page = await repository.list_users(UserFilters(email="dup@example.com"))
    assert page.total == 1


async def test_lookups_of_missing_user_raise_not_found(repository) -> None:
    with pytest.raises(NotFoundError):
        await repository.get_by_id("missing-id")
    with pytest.raises(NotFoundError):
        await repository.get_by_email("nobody@example.com")
    with pytest.raises(NotFoundError):
        await repository.get_credential_by_email("nobody@example.com")


async def test_update_applies_only_supplied_fields(repository, build_user_input) -> None:
    user_id = await repository.create(build_user_input("carol@example.com"))

    updated = await repository.update_by_id(
        user_id, UserUpdate(city="Lyon", is_block=True, email_verified=True)
    )

    assert updated.city == "Lyon"
    assert updated.is_block is True
    assert updated.email_verified is True
    assert updated.name == "Alice Martin"
    assert updated.age == 30
    assert updated.password is None
    assert updated.updated_at != "2024-01-01T00:00:00+00:00"

    credential = await repository.get_credential_by_email("carol@example.com")
    assert credential.password == "hashed-password"


async def test_update_refreshes_updated_at_every_time(repository, build_user_input) -> None:
    user_id = await repository.create(build_user_input("dave@example.com"))

    first = await repository.update_by_id(user_id, UserUpdate(age=31))
    second = await repository.update_by_id(user_id, UserUpdate(age=32))

    assert first.updated_at != "2024-01-01T00:00:00+00:00"
    assert second.updated_at >= first.updated_at
    assert second.age == 32


async def test_update_ignores_caller_supplied_updated_at(repository, build_user_input) -> None:
    user_id = await repository.create(build_user_input("stale@example.com"))

    updated = await repository.update_by_id(
        user_id, UserUpdate(city="Lyon", updated_at="1999-01-01T00:00:00+00:00")
    )
    stored = await repository.get_by_id(user_id)

    assert updated.updated_at != "1999-01-01T00:00:00+00:00"
    assert updated.updated_at > "2024-01-01T00:00:00+00:00"
    assert stored.updated_at == updated.updated_at


async def test_update_with_no_fields_raises_internal_error(repository, build_user_input) -> None:
    user_id = await repository.create(build_user_input("erin@example.com"))

    with pytest.raises(InternalRepositoryError):
        await repository.update_by_id(user_id, UserUpdate())

    user = await repository.get_by_id(user_id)
    assert user.updated_at == "2024-01-01T00:00:00+00:00"


async def test_update_missing_user_raises_not_found(repository) -> None:
    with pytest.raises(NotFoundError):
        await repository.update_by_id("missing-id", UserUpdate(city="Nice"))
    with pytest.raises(NotFoundError):
        await repository.update_by_id("65a000000000000000000000", UserUpdate(city="Nice"))


async def test_delete_removes_user(repository, build_user_input) -> None:
    user_id = await repository.create(build_user_input("frank@example.com"))

    await repository.delete_by_id(user_id)

    with pytest.raises(NotFoundError):
        await repository.get_by_id(user_id)
    with pytest.raises(NotFoundError):
        await repository.delete_by_id(user_id)


async def test_list_users_filters_and_paginates_by_join_date(repository, build_user_input) -> None:
    for day in range(1, 13):
        await repository.create(
            build_user_input(
                f"paris{day}@example.com",
                join_date=f"2024-01-{day:02d}T00:00:00+00:00",
            )
        )
    for day in range(1, 4):
        await repository.create(
            build_user_input(
                f"london{day}@example.com",
                city="London",
                join_date=f"2024-02-{day:02d}T00:00:00+00:00",
            )
        )

    page = await repository.list_users(
        UserFilters(city="Paris"), PaginationOptions(page=2, limit=5)
    )

    assert page.total == 12
    assert len(page.records) == 5
    assert all(user.city == "Paris" for user in page.records)
    assert [user.join_date for user in page.records] == [
        f"2024-01-{day:02d}T00:00:00+00:00" for day in range(7, 2, -1)
    ]
    assert all(user.password is None for user in page.records)


async def test_list_users_substring_filters_ignore_case(repository, build_user_input) -> None:
    await repository.create(build_user_input("Grace.Hopper@Navy.mil", name="Grace Hopper"))
    await repository.create(build_user_input("ada@example.com", name="Ada Lovelace"))

    by_email = await repository.list_users(UserFilters(email="navy"))
    by_name = await repository.list_users(UserFilters(name="LOVE"))

    assert [user.email for user in by_email.records] == ["Grace.Hopper@Navy.mil"]
    assert [user.name for user in by_name.records] == ["Ada Lovelace"]


async def test_list_users_combines_exact_filters(repository, build_user_input) -> None:
    await repository.create(build_user_input("u1@example.com", user_role=1, is_block=True))
    await repository.create(build_user_input("u2@example.com", user_role=1, is_block=False))
    await repository.create(build_user_input("u3@example.com", user_role=0, is_block=True, gender="male"))

    page = await repository.list_users(UserFilters(user_role=1, is_block=True))
    males = await repository.list_users(UserFilters(gender="male"))

    assert [user.email for user in page.records] == ["u1@example.com"]
    assert page.total == 1
    assert [user.email for user in males.records] == ["u3@example.com"]


async def test_list_users_empty_result(repository) -> None:
    page = await repository.list_users(UserFilters(city="Atlantis"))

    assert page.records == []
    assert page.total == 0
