"""用户领域模型"""

from datetime import datetime, timezone
from enum import IntEnum
from typing import Any, Optional

from pydantic import BaseModel, Field

# 布尔类型字段，不同存储后端需要做归一化处理
BOOLEAN_FIELDS = ("email_verified", "is_block")


def now_iso() -> str:
    """获取当前UTC时间的ISO格式字符串"""
    return datetime.now(timezone.utc).isoformat(timespec="microseconds")


class UserRole(IntEnum):
    """用户角色枚举"""

    USER = 0
    ADMIN = 1


class UserInput(BaseModel):
    """创建用户时写入存储的数据"""

    email: str
    password: str  # 已哈希的密码
    name: str
    email_verified: bool = False
    picture: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    father_name: Optional[str] = None
    join_date: Optional[str] = None
    user_role: int = UserRole.USER.value
    is_block: bool = False
    updated_at: Optional[str] = None


class UserUpdate(BaseModel):
    """用户局部更新数据，值为None的字段不参与更新"""

    email: Optional[str] = None
    password: Optional[str] = None
    name: Optional[str] = None
    email_verified: Optional[bool] = None
    picture: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    father_name: Optional[str] = None
    join_date: Optional[str] = None
    user_role: Optional[int] = None
    is_block: Optional[bool] = None
    updated_at: Optional[str] = None

    def effective_fields(self) -> dict[str, Any]:
        """获取实际需要更新的字段(排除updated_at，由仓储强制写入)"""
        return {
            key: value
            for key, value in self.model_dump(exclude={"updated_at"}).items()
            if value is not None
        }


class User(BaseModel):
    """用户领域模型(存储形态)"""

    id: str
    email: str
    password: Optional[str] = None  # 读取路径默认剥离密码
    email_verified: bool = False
    name: str
    picture: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    age: Optional[int] = None
    gender: Optional[str] = None
    father_name: Optional[str] = None
    join_date: Optional[str] = None
    user_role: Optional[int] = None
    is_block: bool = False
    updated_at: Optional[str] = None

    class Config:
        from_attributes = True

    def without_password(self) -> "User":
        """返回剥离密码后的副本"""
        return self.model_copy(update={"password": None})


class UserFilters(BaseModel):
    """用户列表过滤条件，所有条件之间为AND关系"""

    email: Optional[str] = None  # 模糊匹配，忽略大小写
    name: Optional[str] = None  # 模糊匹配，忽略大小写
    city: Optional[str] = None
    gender: Optional[str] = None
    user_role: Optional[int] = None
    is_block: Optional[bool] = None


class PaginationOptions(BaseModel):
    """分页参数"""

    page: int = Field(default=1, ge=1)
    limit: int = Field(default=10, ge=1)

    @property
    def offset(self) -> int:
        return (self.page - 1) * self.limit


class UserPage(BaseModel):
    """用户列表查询结果"""

    records: list[User] = Field(default_factory=list)
    total: int = 0
