"""用户查询用例"""

from typing import Optional

from app.application.services.user_service import UserListResult, UserService
from app.domain.models.user import PaginationOptions, User, UserFilters


class GetUserInformationUsecase:
    """用户查询用例，供HTTP接口层调用"""

    def __init__(self, user_service: UserService) -> None:
        self.user_service = user_service

    async def get_all_users(
        self,
        filters: Optional[UserFilters] = None,
        pagination: Optional[PaginationOptions] = None,
    ) -> UserListResult:
        return await self.user_service.get_all_user_information(filters, pagination)

    async def get_user_by_id(self, user_id: str) -> User:
        return await self.user_service.by_id(user_id)

    async def get_user_by_email(self, email: str) -> User:
        return await self.user_service.by_email(email)

    async def get_user_password_by_email(self, email: str) -> User:
        return await self.user_service.password_by_email(email)
