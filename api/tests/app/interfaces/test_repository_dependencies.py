from mongomock_motor import AsyncMongoMockClient

from app.infrastructure.repositories.mongo_user_repository import MongoUserRepository
from app.infrastructure.repositories.sqlite_user_repository import (
    SQLiteUserRepository,
)
from app.interfaces import repository_dependencies
from core.config import Settings


class _FakeMongo:
    def __init__(self) -> None:
        self.database = AsyncMongoMockClient()["user-crud-test"]


class _FakeSQLite:
    session_factory = object()


def test_local_mode_uses_sqlite_repository(monkeypatch) -> None:
    monkeypatch.setattr(
        repository_dependencies, "get_settings", lambda: Settings(app_mode="local")
    )
    monkeypatch.setattr(repository_dependencies, "get_sqlite", lambda: _FakeSQLite())

    repo = repository_dependencies.get_user_repository()

    assert isinstance(repo, SQLiteUserRepository)
    assert repo.session_factory is _FakeSQLite.session_factory


def test_other_modes_use_mongo_repository(monkeypatch) -> None:
    monkeypatch.setattr(
        repository_dependencies,
        "get_settings",
        lambda: Settings(app_mode="production"),
    )
    monkeypatch.setattr(repository_dependencies, "get_mongo", lambda: _FakeMongo())

    repo = repository_dependencies.get_user_repository()

    assert isinstance(repo, MongoUserRepository)
