import logging

from app.application.services.user_service import UserService
from app.application.usecases.get_user_information import GetUserInformationUsecase
from app.application.usecases.store_user_information import (
    StoreUserInformationUsecase,
)
from app.application.usecases.update_user_information import (
    UpdateUserInformationUsecase,
)
from app.domain.repositories.user_repository import UserRepository
from app.interfaces.repository_dependencies import get_user_repository
from fastapi import Depends

logger = logging.getLogger(__name__)


def get_user_service(
    user_repository: UserRepository = Depends(get_user_repository),
) -> UserService:
    """获取用户服务"""
    logger.debug("加载获取UserService")
    return UserService(user_repository=user_repository)


def get_user_information_usecase(
    user_service: UserService = Depends(get_user_service),
) -> GetUserInformationUsecase:
    """获取用户查询用例"""
    return GetUserInformationUsecase(user_service=user_service)


def get_store_user_information_usecase(
    user_service: UserService = Depends(get_user_service),
) -> StoreUserInformationUsecase:
    """获取用户创建用例"""
    return StoreUserInformationUsecase(user_service=user_service)


def get_update_user_information_usecase(
    user_service: UserService = Depends(get_user_service),
) -> UpdateUserInformationUsecase:
    """获取用户更新/删除用例"""
    return UpdateUserInformationUsecase(user_service=user_service)
