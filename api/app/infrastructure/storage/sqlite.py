import logging
from functools import lru_cache
from pathlib import Path
from typing import Optional

from app.infrastructure.models.base import Base
from core.config import get_settings
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

logger = logging.getLogger(__name__)


class SQLite:
    """SQLite数据库客户端封装类，用于完成本地数据库的连接和建表"""

    def __init__(self, database_path: Optional[str] = None):
        """构造函数，记录数据库文件路径，引擎在init中创建"""
        self._engine: Optional[AsyncEngine] = None
        self._session_factory: Optional[async_sessionmaker] = None
        self._settings = get_settings()
        self._database_path = database_path or self._settings.sqlite_database_path

    @property
    def database_url(self) -> str:
        return f"sqlite+aiosqlite:///{self._database_path}"

    async def init(self) -> None:
        """初始化SQLite数据库连接，并幂等创建users表"""
        # 1. 判断是否已经初始化
        if self._engine is not None:
            logger.warning("SQLite数据库客户端已初始化，跳过重复初始化。")
            return
        # 2. 确保数据库文件所在目录存在
        if self._database_path != ":memory:":
            Path(self._database_path).parent.mkdir(parents=True, exist_ok=True)

        # 3. 创建数据库引擎和会话工厂
        try:
            logger.info(f"正在初始化SQLite数据库客户端, 路径: {self._database_path}")
            self._engine = create_async_engine(
                self.database_url,
                echo=self._settings.env == "development",
            )
            self._session_factory = async_sessionmaker(
                autocommit=False,
                autoflush=False,
                expire_on_commit=False,
                bind=self._engine,
            )

            # 4. 建表(CREATE TABLE IF NOT EXISTS)
            async with self._engine.begin() as async_conn:
                await async_conn.run_sync(Base.metadata.create_all)
            logger.info("SQLite数据库客户端初始化成功，users表检查/创建完成。")
        except Exception as e:
            logger.error(f"SQLite数据库客户端初始化失败: {e}")
            raise

    async def shutdown(self) -> None:
        """关闭SQLite数据库连接"""
        if self._engine:
            await self._engine.dispose()
            logger.info("SQLite数据库客户端连接已关闭.")
        else:
            logger.warning("SQLite数据库客户端未初始化，无法关闭连接.")
        self._engine = None
        self._session_factory = None

    @property
    def session_factory(self) -> async_sessionmaker[AsyncSession]:
        """获取SQLite数据库会话工厂

        Returns:
            async_sessionmaker[AsyncSession]: SQLite数据库会话工厂
        """
        if not self._session_factory:
            raise RuntimeError(
                "SQLite数据库客户端未初始化，请先调用init方法进行初始化。"
            )
        return self._session_factory


@lru_cache()
def get_sqlite() -> SQLite:
    """获取SQLite实例"""
    return SQLite()
