"""用户服务，在仓储调用外补充业务校验(邮箱重复、用户存在性)"""

import logging
from typing import Optional

from app.application.errors.exceptions import ConflictError
from app.domain.models.user import (
    PaginationOptions,
    User,
    UserFilters,
    UserInput,
    UserUpdate,
)
from app.domain.repositories.user_repository import UserRepository
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)


class UserListResult(BaseModel):
    """用户列表结果，附带实际生效的分页参数"""

    records: list[User] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10


class UserService:
    """用户服务"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def get_all_user_information(
        self,
        filters: Optional[UserFilters] = None,
        pagination: Optional[PaginationOptions] = None,
    ) -> UserListResult:
        """按过滤条件分页获取用户列表"""
        pagination = pagination or PaginationOptions()
        result = await self.user_repository.list_users(filters, pagination)
        return UserListResult(
            records=result.records,
            total=result.total,
            page=pagination.page,
            limit=pagination.limit,
        )

    async def store_user_information(self, data: UserInput) -> User:
        """创建用户

        先检查邮箱是否已存在，再执行写入。两步之间不是原子操作，
        并发写入同一邮箱时以仓储返回None为准，同样视为冲突。

        Raises:
            ConflictError: 邮箱已存在
        """
        if await self.check_user_by_email_exist(data.email):
            raise ConflictError(f"邮箱 {data.email} 已存在")

        user_id = await self.user_repository.create(data)
        if user_id is None:
            raise ConflictError(f"邮箱 {data.email} 已存在")

        logger.info(f"用户创建成功: {user_id}")
        return await self.by_id(user_id)

    async def update_user_information(self, user_id: str, patch: UserUpdate) -> User:
        """更新用户信息，用户不存在时抛出NotFoundError"""
        await self.by_id(user_id)
        return await self.user_repository.update_by_id(user_id, patch)

    async def check_user_by_email_exist(self, email: str) -> bool:
        """检查邮箱是否已被使用

        查询过程中出现的任何异常都按"不存在"处理，基础设施故障会被当作未重复，
        最终由存储层的唯一约束兜底。
        """
        try:
            user = await self.by_email(email)
        except Exception as e:
            logger.warning(f"邮箱查重失败，按不存在处理(email={email}): {e}")
            return False
        return bool(user and user.email)

    async def by_email(self, email: str) -> User:
        return await self.user_repository.get_by_email(email)

    async def password_by_email(self, email: str) -> User:
        return await self.user_repository.get_credential_by_email(email)

    async def by_id(self, user_id: str) -> User:
        return await self.user_repository.get_by_id(user_id)

    async def delete_user_by_id(self, user_id: str) -> None:
        await self.user_repository.delete_by_id(user_id)
