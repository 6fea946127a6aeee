"""存储后端启动/关闭，根据 app_mode 选择 SQLite 或 MongoDB"""

import logging

from app.infrastructure.repositories.mongo_user_repository import MongoUserRepository
from app.infrastructure.storage.mongo import get_mongo
from app.infrastructure.storage.sqlite import get_sqlite
from core.config import get_settings

logger = logging.getLogger(__name__)


async def init_storage() -> None:
    """校验启动配置并初始化当前模式对应的存储客户端"""
    settings = get_settings()

    # 1. 未配置APP_KEY时拒绝启动
    if not settings.app_key:
        logger.error("未配置APP_KEY，应用无法启动")
        raise RuntimeError("APP_KEY is not configured")

    # 2. 本地模式使用SQLite
    if settings.use_sqlite:
        logger.info(f"运行于LOCAL模式(SQLite), 路径: {settings.sqlite_database_path}")
        await get_sqlite().init()
        return

    # 3. 其余模式使用MongoDB
    logger.info("运行于PRODUCTION模式(MongoDB)")
    mongo = get_mongo()
    await mongo.init()
    if settings.mongo_ensure_email_index:
        await MongoUserRepository(mongo.database).ensure_indexes()


async def shutdown_storage() -> None:
    """关闭当前模式对应的存储客户端"""
    settings = get_settings()
    if settings.use_sqlite:
        await get_sqlite().shutdown()
    else:
        await get_mongo().shutdown()
