"""用户路由模块 - 用户信息增删改查"""

import logging
from typing import Optional

from app.application.errors.exceptions import BadRequestError, NotFoundError
from app.application.usecases.get_user_information import GetUserInformationUsecase
from app.application.usecases.store_user_information import (
    StoreUserInformationUsecase,
)
from app.application.usecases.update_user_information import (
    UpdateUserInformationUsecase,
)
from app.domain.models.user import PaginationOptions, UserFilters
from app.interfaces.schemas import Response
from app.interfaces.schemas.user import (
    UserCreateRequest,
    UserListResponse,
    UserResponse,
    UserUpdateRequest,
)
from app.interfaces.service_dependencies import (
    get_store_user_information_usecase,
    get_update_user_information_usecase,
    get_user_information_usecase,
)
from fastapi import APIRouter, Depends, Query

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/users", tags=["用户模块"])


@router.get(
    "",
    response_model=Response[UserListResponse],
    summary="获取用户列表",
    description="按邮箱/姓名(模糊匹配)、城市、性别、角色、封禁状态过滤，按加入时间倒序分页返回",
)
async def list_users(
    email: Optional[str] = None,
    name: Optional[str] = None,
    city: Optional[str] = None,
    gender: Optional[str] = None,
    user_role: Optional[int] = None,
    is_block: Optional[bool] = None,
    page: int = Query(default=1, ge=1),
    limit: int = Query(default=10, ge=1, le=100),
    usecase: GetUserInformationUsecase = Depends(get_user_information_usecase),
) -> Response:
    """获取用户列表"""
    filters = UserFilters(
        email=email,
        name=name,
        city=city,
        gender=gender,
        user_role=user_role,
        is_block=is_block,
    )
    result = await usecase.get_all_users(
        filters, PaginationOptions(page=page, limit=limit)
    )

    return Response.success(
        data=UserListResponse(
            users=[UserResponse.from_domain(user) for user in result.records],
            total=result.total,
            page=result.page,
            limit=result.limit,
        )
    )


@router.get(
    "/{user_id}",
    response_model=Response[UserResponse],
    summary="获取用户详情",
    description="根据用户 ID 获取用户详情",
)
async def get_user(
    user_id: str,
    usecase: GetUserInformationUsecase = Depends(get_user_information_usecase),
) -> Response:
    """获取用户详情"""
    user = await usecase.get_user_by_id(user_id)
    return Response.success(data=UserResponse.from_domain(user))


@router.post(
    "",
    response_model=Response[UserResponse],
    summary="创建用户",
    description="创建用户，邮箱已存在时返回409",
)
async def create_user(
    request: UserCreateRequest,
    usecase: StoreUserInformationUsecase = Depends(get_store_user_information_usecase),
) -> Response:
    """创建用户"""
    user = await usecase.store_user_information(request.to_domain())
    logger.info(f"创建用户成功: {user.id}")
    return Response.success(msg="创建成功", data=UserResponse.from_domain(user))


@router.patch(
    "/{user_id}",
    response_model=Response[UserResponse],
    summary="更新用户信息",
    description="局部更新用户信息，仅提交的字段会被修改",
)
async def update_user(
    user_id: str,
    request: UserUpdateRequest,
    usecase: UpdateUserInformationUsecase = Depends(
        get_update_user_information_usecase
    ),
) -> Response:
    """更新用户信息"""
    patch = request.to_domain()
    if not patch.effective_fields():
        raise BadRequestError("未提供需要更新的字段")

    user = await usecase.update_user_information_by_id(user_id, patch)
    return Response.success(msg="更新成功", data=UserResponse.from_domain(user))


@router.delete(
    "/{user_id}",
    response_model=Response,
    summary="删除用户",
    description="根据用户 ID 删除用户",
)
async def delete_user(
    user_id: str,
    usecase: UpdateUserInformationUsecase = Depends(
        get_update_user_information_usecase
    ),
) -> Response:
    """删除用户"""
    deleted = await usecase.delete_user_by_id(user_id)
    if not deleted:
        raise NotFoundError("用户不存在")

    logger.info(f"删除用户成功: {user_id}")
    return Response.success(msg="删除成功")
