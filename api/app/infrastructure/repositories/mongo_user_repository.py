"""基于MongoDB的用户仓储实现"""

import logging
import re
from typing import Any, Optional, Union

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
)
from app.domain.repositories.user_repository import UserRepository
from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo import ASCENDING, DESCENDING, ReturnDocument
from pymongo.errors import DuplicateKeyError

logger = logging.getLogger(__name__)


def to_object_id(user_id: Union[str, ObjectId]) -> Union[ObjectId, str]:
    """将字符串ID转换为ObjectId，非法ID保持原始字符串"""
    try:
        return ObjectId(user_id)
    except (InvalidId, TypeError):
        return user_id


class MongoUserRepository(UserRepository):
    """基于MongoDB users集合的用户仓储实现"""

    collection_name = "users"

    def __init__(self, database: AsyncIOMotorDatabase) -> None:
        """构造函数，完成数据仓储初始化"""
        self.collection = database[self.collection_name]

    async def ensure_indexes(self) -> None:
        """在email上创建唯一索引，使重复邮箱插入由存储层拒绝"""
        await self.collection.create_index(
            [("email", ASCENDING)], unique=True, name="uq_users_email"
        )
        logger.info("MongoDB users集合email唯一索引检查/创建完成")

    @staticmethod
    def _from_document(doc: dict[str, Any], with_password: bool = False) -> User:
        """将MongoDB文档转换为领域模型，_id统一转为字符串"""
        data = dict(doc)
        raw_id = data.pop("_id")
        data["id"] = str(raw_id)
        user = User.model_validate(data)
        return user if with_password else user.without_password()

    @staticmethod
    def _build_query(filters: UserFilters) -> dict[str, Any]:
        """将过滤条件转换为MongoDB查询，模糊条件使用忽略大小写的正则"""
        query: dict[str, Any] = {}
        if filters.email:
            query["email"] = {"$regex": re.escape(filters.email), "$options": "i"}
        if filters.name:
            query["name"] = {"$regex": re.escape(filters.name), "$options": "i"}
        if filters.city:
            query["city"] = filters.city
        if filters.gender:
            query["gender"] = filters.gender
        if filters.user_role is not None:
            query["user_role"] = filters.user_role
        if filters.is_block is not None:
            query["is_block"] = filters.is_block
        return query

    async def list_users(
        self,
        filters: Optional[UserFilters] = None,
        pagination: Optional[PaginationOptions] = None,
    ) -> UserPage:
        """按过滤条件分页获取用户列表"""
        filters = filters or UserFilters()
        pagination = pagination or PaginationOptions()
        query = self._build_query(filters)

        try:
            cursor = self.collection.find(
                query,
                sort=[("join_date", DESCENDING)],
                skip=pagination.offset,
                limit=pagination.limit,
            )
            docs = await cursor.to_list(length=pagination.limit)
            total = await self.collection.count_documents(query)
        except Exception as e:
            logger.error(f"查询用户列表失败: {e}")
            raise InternalRepositoryError(e) from e

        logger.debug(
            f"list_users query={query} page={pagination.page} "
            f"limit={pagination.limit} total={total}"
        )
        return UserPage(records=[self._from_document(doc) for doc in docs], total=total)

    async def _find_one(self, query: dict[str, Any], with_password: bool = False) -> User:
        """按条件获取单个用户，不存在时抛出NotFoundError"""
        try:
            doc = await self.collection.find_one(query)
        except Exception as e:
            logger.error(f"查询用户失败: {e}")
            raise InternalRepositoryError(e) from e

        if doc is None:
            raise NotFoundError("User")
        return self._from_document(doc, with_password=with_password)

    async def get_by_id(self, user_id: str) -> User:
        """根据 ID 获取用户"""
        return await self._find_one({"_id": to_object_id(user_id)})

    async def get_by_email(self, email: str) -> User:
        """根据邮箱获取用户"""
        return await self._find_one({"email": email})

    async def get_credential_by_email(self, email: str) -> User:
        """根据邮箱获取用户凭据(包含密码)"""
        return await self._find_one({"email": email}, with_password=True)

    async def create(self, data: UserInput) -> Optional[str]:
        """创建用户

        重复邮箱由上层预检查拦截；若集合上存在email唯一索引，冲突时返回None。
        """
        try:
            result = await self.collection.insert_one(data.model_dump())
        except DuplicateKeyError:
            logger.warning(f"邮箱已存在，跳过创建: {data.email}")
            return None
        except Exception as e:
            logger.error(f"创建用户失败: {e}")
            raise InternalRepositoryError(e) from e

        if result.inserted_id is None:
            return None
        user_id = str(result.inserted_id)
        logger.info(f"用户创建成功: {user_id}")
        return user_id

    async def update_by_id(self, user_id: str, patch: UserUpdate) -> User:
        """局部更新用户，仅更新非None字段并强制刷新updated_at"""
        values = patch.effective_fields()
        if not values:
            raise InternalRepositoryError(ValueError("No fields provided for update"))

        for key in BOOLEAN_FIELDS:
            if key in values:
                values[key] = bool(values[key])
        values["updated_at"] = now_iso()

        try:
            doc = await self.collection.find_one_and_update(
                {"_id": to_object_id(user_id)},
                {"$set": values},
                return_document=ReturnDocument.AFTER,
            )
        except Exception as e:
            logger.error(f"更新用户失败(user_id={user_id}): {e}")
            raise InternalRepositoryError(e) from e

        if doc is None:
            raise NotFoundError("User", f"User not found with id {user_id}")
        return self._from_document(doc)

    async def delete_by_id(self, user_id: str) -> None:
        """删除用户"""
        try:
            result = await self.collection.delete_one({"_id": to_object_id(user_id)})
        except Exception as e:
            logger.error(f"删除用户失败(user_id={user_id}): {e}")
            raise InternalRepositoryError(e) from e

        if result.deleted_count == 0:
            raise NotFoundError("User", f"User not found with id {user_id}")
