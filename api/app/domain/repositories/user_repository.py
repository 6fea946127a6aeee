"""用户仓储接口"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.models.user import (
    PaginationOptions,
    User,
    UserFilters,
    UserInput,
    UserPage,
    UserUpdate,
)


class UserRepository(ABC):
    """用户仓储抽象接口

    各存储后端对外统一使用字符串ID，记录不存在时抛出NotFoundError，
    底层异常统一包装为InternalRepositoryError。
    """

    @abstractmethod
    async def list_users(
        self,
        filters: Optional[UserFilters] = None,
        pagination: Optional[PaginationOptions] = None,
    ) -> UserPage:
        """按过滤条件分页获取用户列表，按join_date倒序"""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: str) -> User:
        """根据 ID 获取用户(不含密码)"""
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> User:
        """根据邮箱获取用户(不含密码)"""
        pass

    @abstractmethod
    async def get_credential_by_email(self, email: str) -> User:
        """根据邮箱获取用户(包含密码，仅用于认证校验)"""
        pass

    @abstractmethod
    async def create(self, data: UserInput) -> Optional[str]:
        """创建用户，邮箱已存在时返回None"""
        pass

    @abstractmethod
    async def update_by_id(self, user_id: str, patch: UserUpdate) -> User:
        """局部更新用户，updated_at 总是被刷新"""
        pass

    @abstractmethod
    async def delete_by_id(self, user_id: str) -> None:
        """删除用户"""
        pass
