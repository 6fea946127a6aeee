import logging
from functools import lru_cache
from typing import Optional

from core.config import get_settings
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase

logger = logging.getLogger(__name__)


class Mongo:
    """MongoDB客户端封装类，用于完成MongoDB的连接和关闭"""

    def __init__(self):
        """构造函数，完成MongoDB客户端属性初始化"""
        self._client: Optional[AsyncIOMotorClient] = None
        self._settings = get_settings()

    async def init(self) -> None:
        """初始化MongoDB连接并执行ping检测"""
        # 1. 判断是否已经初始化
        if self._client is not None:
            logger.warning("MongoDB客户端已初始化，跳过重复初始化。")
            return

        # 2. 创建客户端并检测连接
        try:
            logger.info("正在初始化MongoDB客户端...")
            self._client = AsyncIOMotorClient(self._settings.mongo_url)
            await self._client.admin.command("ping")
            logger.info(
                f"MongoDB客户端初始化成功, 数据库: {self._settings.mongo_db_name}"
            )
        except Exception as e:
            logger.error(f"MongoDB客户端初始化失败: {e}")
            raise

    async def shutdown(self) -> None:
        """关闭MongoDB连接"""
        if self._client:
            self._client.close()
            logger.info("MongoDB客户端连接已关闭.")
        else:
            logger.warning("MongoDB客户端未初始化，无法关闭连接.")
        self._client = None

    @property
    def database(self) -> AsyncIOMotorDatabase:
        """获取配置中指定的MongoDB数据库"""
        if not self._client:
            raise RuntimeError("MongoDB客户端未初始化，请先调用init方法进行初始化。")
        return self._client[self._settings.mongo_db_name]


@lru_cache()
def get_mongo() -> Mongo:
    """获取Mongo实例"""
    return Mongo()
