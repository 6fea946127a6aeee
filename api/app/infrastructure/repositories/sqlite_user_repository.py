"""基于SQLite的用户仓储实现"""

import logging
import uuid
from typing import Any, Optional

from app.domain.models.user import (
    BOOLEAN_FIELDS,
    PaginationOptions,
    User,
    UserFilters,
    UserInput,
    UserPage,
    UserUpdate,
    now_iso,
)
from app.domain.repositories.exceptions import (
    InternalRepositoryError,
    NotFoundError,
    RepositoryError,
)
from app.domain.repositories.user_repository import UserRepository
from app.infrastructure.models.user import UserModel
from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

logger = logging.getLogger(__name__)


class SQLiteUserRepository(UserRepository):
    """基于SQLite的用户仓储实现，每次操作使用独立会话并在写操作后提交"""

    def __init__(self, session_factory: async_sessionmaker[AsyncSession]) -> None:
        """构造函数，完成数据仓储初始化"""
        self.session_factory = session_factory

    @staticmethod
    def _build_conditions(filters: UserFilters) -> list[Any]:
        """将过滤条件编译为WHERE子句(参数绑定)，各条件之间为AND关系"""
        conditions: list[Any] = []
        if filters.email:
            conditions.append(UserModel.email.icontains(filters.email, autoescape=True))
        if filters.name:
            conditions.append(UserModel.name.icontains(filters.name, autoescape=True))
        if filters.city:
            conditions.append(UserModel.city == filters.city)
        if filters.gender:
            conditions.append(UserModel.gender == filters.gender)
        if filters.user_role is not None:
            conditions.append(UserModel.user_role == filters.user_role)
        if filters.is_block is not None:
            conditions.append(UserModel.is_block == (1 if filters.is_block else 0))
        return conditions

    async def list_users(
        self,
        filters: Optional[UserFilters] = None,
        pagination: Optional[PaginationOptions] = None,
    ) -> UserPage:
        """按过滤条件分页获取用户列表"""
        filters = filters or UserFilters()
        pagination = pagination or PaginationOptions()
        conditions = self._build_conditions(filters)

        try:
            async with self.session_factory() as session:
                count_stmt = (
                    select(func.count()).select_from(UserModel).where(*conditions)
                )
                total = (await session.execute(count_stmt)).scalar() or 0

                stmt = (
                    select(UserModel)
                    .where(*conditions)
                    .order_by(UserModel.join_date.desc())
                    .limit(pagination.limit)
                    .offset(pagination.offset)
                )
                records = (await session.execute(stmt)).scalars().all()
        except Exception as e:
            logger.error(f"查询用户列表失败: {e}")
            raise InternalRepositoryError(e) from e

        logger.debug(
            f"list_users filters={filters.model_dump(exclude_none=True)} "
            f"page={pagination.page} limit={pagination.limit} total={total}"
        )
        return UserPage(records=[record.to_domain() for record in records], total=total)

    async def _get_one(self, *conditions: Any, with_password: bool = False) -> User:
        """按条件获取单个用户，不存在时抛出NotFoundError"""
        try:
            async with self.session_factory() as session:
                stmt = select(UserModel).where(*conditions)
                record = (await session.execute(stmt)).scalar_one_or_none()
        except Exception as e:
            logger.error(f"查询用户失败: {e}")
            raise InternalRepositoryError(e) from e

        if record is None:
            raise NotFoundError("User")
        return record.to_domain(with_password=with_password)

    async def get_by_id(self, user_id: str) -> User:
        """根据 ID 获取用户"""
        return await self._get_one(UserModel.id == user_id)

    async def get_by_email(self, email: str) -> User:
        """根据邮箱获取用户"""
        return await self._get_one(UserModel.email == email)

    async def get_credential_by_email(self, email: str) -> User:
        """根据邮箱获取用户凭据(包含密码)"""
        return await self._get_one(UserModel.email == email, with_password=True)

    async def create(self, data: UserInput) -> Optional[str]:
        """创建用户，email唯一约束冲突时返回None"""
        user_id = str(uuid.uuid4())
        try:
            async with self.session_factory() as session:
                session.add(UserModel.from_domain(user_id, data))
                try:
                    await session.commit()
                except IntegrityError as e:
                    await session.rollback()
                    if "users.email" in str(e.orig):
                        logger.warning(f"邮箱已存在，跳过创建: {data.email}")
                        return None
                    raise
        except Exception as e:
            logger.error(f"创建用户失败: {e}")
            raise InternalRepositoryError(e) from e

        logger.info(f"用户创建成功: {user_id}")
        return user_id

    async def update_by_id(self, user_id: str, patch: UserUpdate) -> User:
        """局部更新用户，仅更新非None字段并强制刷新updated_at"""
        values = patch.effective_fields()
        if not values:
            raise InternalRepositoryError(ValueError("No fields provided for update"))

        for key in BOOLEAN_FIELDS:
            if key in values:
                values[key] = 1 if values[key] else 0
        values["updated_at"] = now_iso()

        try:
            async with self.session_factory() as session:
                stmt = (
                    update(UserModel).where(UserModel.id == user_id).values(**values)
                )
                result = await session.execute(stmt)
                if result.rowcount == 0:
                    raise NotFoundError("User", f"User not found with id {user_id}")
                await session.commit()
        except RepositoryError:
            raise
        except Exception as e:
            logger.error(f"更新用户失败(user_id={user_id}): {e}")
            raise InternalRepositoryError(e) from e

        return await self.get_by_id(user_id)

    async def delete_by_id(self, user_id: str) -> None:
        """删除用户"""
        try:
            async with self.session_factory() as session:
                stmt = delete(UserModel).where(UserModel.id == user_id)
                result = await session.execute(stmt)
                if result.rowcount == 0:
                    raise NotFoundError("User", f"User not found with id {user_id}")
                await session.commit()
        except RepositoryError:
            raise
        except Exception as e:
            logger.error(f"删除用户失败(user_id={user_id}): {e}")
            raise InternalRepositoryError(e) from e
