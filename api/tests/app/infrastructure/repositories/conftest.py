from pathlib import Path
from typing import AsyncGenerator

import pytest
from mongomock_motor import AsyncMongoMockClient

from app.domain.models.user import UserInput
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.mongo_user_repository import MongoUserRepository
from app.infrastructure.repositories.sqlite_user_repository import (
    SQLiteUserRepository,
)
from app.infrastructure.storage.sqlite import SQLite


def _build_user_input(email: str, **overrides) -> UserInput:
    data = {
        "email": email,
        "password": "hashed-password",
        "name": "Alice Martin",
        "email_verified": False,
        "picture": "https://example.com/alice.png",
        "phone": "+33 6 00 00 00 00",
        "city": "Paris",
        "address": "1 Rue de Rivoli",
        "age": 30,
        "gender": "female",
        "father_name": "Bob Martin",
        "join_date": "2024-01-01T00:00:00+00:00",
        "user_role": 0,
        "is_block": False,
        "updated_at": "2024-01-01T00:00:00+00:00",
    }
    data.update(overrides)
    return UserInput(**data)


@pytest.fixture
def build_user_input():
    return _build_user_input


@pytest.fixture
async def sqlite_repository(tmp_path: Path) -> AsyncGenerator[SQLiteUserRepository, None]:
    client = SQLite(database_path=str(tmp_path / "users.db"))
    await client.init()
    try:
        yield SQLiteUserRepository(session_factory=client.session_factory)
    finally:
        await client.shutdown()


@pytest.fixture
async def mongo_repository() -> MongoUserRepository:
    client = AsyncMongoMockClient()
    repo = MongoUserRepository(database=client["user-crud-test"])
    await repo.ensure_indexes()
    return repo


@pytest.fixture(params=["sqlite", "mongo"])
async def repository(
    request, tmp_path: Path
) -> AsyncGenerator[UserRepository, None]:
    """两种存储后端需要满足同一套仓储契约"""
    if request.param == "sqlite":
        client = SQLite(database_path=str(tmp_path / "users.db"))
        await client.init()
        try:
            yield SQLiteUserRepository(session_factory=client.session_factory)
        finally:
            await client.shutdown()
    else:
        client = AsyncMongoMockClient()
        repo = MongoUserRepository(database=client["user-crud-test"])
        await repo.ensure_indexes()
        yield repo
