"""用户更新/删除用例"""

import logging

from app.application.services.user_service import UserService
from app.domain.models.user import User, UserUpdate, now_iso
from app.domain.repositories.exceptions import NotFoundError
from core.security import get_password_hash

logger = logging.getLogger(__name__)


class UpdateUserInformationUsecase:
    """用户更新/删除用例"""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def update_user_information_by_id(
        self, user_id: str, patch: UserUpdate
    ) -> User:
        """局部更新用户信息，写入当前时间作为updated_at，明文密码在此处哈希"""
        update: dict = {"updated_at": now_iso()}
        if patch.password:
            update["password"] = get_password_hash(patch.password)
        return await self.user_service.update_user_information(
            user_id, patch.model_copy(update=update)
        )

    async def delete_user_by_id(self, user_id: str) -> bool:
        """删除用户，用户不存在时返回False"""
        try:
            await self.user_service.delete_user_by_id(user_id)
        except NotFoundError:
            logger.warning(f"删除用户失败，用户不存在: {user_id}")
            return False
        return True
