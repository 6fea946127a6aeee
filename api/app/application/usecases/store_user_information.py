"""用户创建用例"""

import logging

from app.application.services.user_service import UserService
from app.domain.models.user import User, UserInput, now_iso
from core.security import get_password_hash

logger = logging.getLogger(__name__)


class StoreUserInformationUsecase:
    """用户创建用例：哈希明文密码并补齐时间戳后交给用户服务写入"""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def store_user_information(self, data: UserInput) -> User:
        """创建用户

        Args:
            data: 用户数据，password 为明文

        Returns:
            User: 创建后的用户(不含密码)
        """
        current = now_iso()
        payload = data.model_copy(
            update={
                "password": get_password_hash(data.password),
                "join_date": data.join_date or current,
                "updated_at": current,
            }
        )
        return await self.user_service.store_user_information(payload)
