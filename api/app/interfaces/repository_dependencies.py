import logging

from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.repositories.mongo_user_repository import MongoUserRepository
from app.infrastructure.repositories.sqlite_user_repository import (
    SQLiteUserRepository,
)
from app.infrastructure.storage.mongo import get_mongo
from app.infrastructure.storage.sqlite import get_sqlite
from core.config import get_settings

logger = logging.getLogger(__name__)


def get_user_repository() -> UserRepository:
    """根据运行模式获取用户数据仓库"""
    settings = get_settings()
    if settings.use_sqlite:
        logger.debug("加载获取SQLiteUserRepository")
        return SQLiteUserRepository(session_factory=get_sqlite().session_factory)

    logger.debug("加载获取MongoUserRepository")
    return MongoUserRepository(database=get_mongo().database)
