import os
import tempfile
from pathlib import Path
from typing import Generator

import pytest

# 测试统一使用本地SQLite模式，需在导入应用前写入环境变量
_TEST_DB_DIR = tempfile.mkdtemp(prefix="user-crud-tests-")
os.environ["APP_KEY"] = "test-app-key"
os.environ["APP_MODE"] = "local"
os.environ["SQLITE_DATABASE_PATH"] = str(Path(_TEST_DB_DIR) / "data.db")
os.environ["ENV"] = "testing"

from core.config import get_settings  # noqa: E402

get_settings.cache_clear()

from app.main import app  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(scope="session")
def client() -> Generator[TestClient, None, None]:
    """
    创建一个可供所有测试用例使用的 TestClient 客户端。
    scope="session" 表示这个fixture 在整个测试用例只会实例一次，这样可以提高效率
    :return: TestClient
    """
    with TestClient(app) as c:
        yield c
