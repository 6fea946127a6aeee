"""用户相关 Schema"""

from typing import Optional

from app.domain.models.user import User, UserInput, UserUpdate
from pydantic import BaseModel, EmailStr, Field


class UserCreateRequest(BaseModel):
    """创建用户请求"""

    email: EmailStr = Field(..., description="邮箱")
    password: str = Field(..., min_length=6, description="明文密码")
    name: str = Field(..., min_length=1, description="姓名")
    email_verified: bool = Field(default=False, description="邮箱是否已验证")
    picture: Optional[str] = Field(None, description="头像地址")
    phone: Optional[str] = Field(None, description="手机号")
    city: Optional[str] = Field(None, description="城市")
    address: Optional[str] = Field(None, description="地址")
    age: Optional[int] = Field(None, ge=0, description="年龄")
    gender: Optional[str] = Field(None, description="性别")
    father_name: Optional[str] = Field(None, description="父亲姓名")
    join_date: Optional[str] = Field(None, description="加入时间，默认当前时间")
    user_role: int = Field(default=0, description="用户角色")
    is_block: bool = Field(default=False, description="是否被封禁")

    def to_domain(self) -> UserInput:
        return UserInput(**self.model_dump())


class UserUpdateRequest(BaseModel):
    """局部更新用户请求，未提供的字段保持不变"""

    email: Optional[EmailStr] = None
    password: Optional[str] = Field(None, min_length=6)
    name: Optional[str] = Field(None, min_length=1)
    email_verified: Optional[bool] = None
    picture: Optional[str] = None
    phone: Optional[str] = None
    city: Optional[str] = None
    address: Optional[str] = None
    age: Optional[int] = Field(None, ge=0)
    gender: Optional[str] = None
    father_name: Optional[str] = None
    join_date: Optional[str] = None
    user_role: Optional[int] = None
    is_block: Optional[bool] = None

    def to_domain(self) -> UserUpdate:
        return UserUpdate(**self.model_dump(exclude_none=True))


class UserResponse(BaseModel):
    """用户信息响应(不含密码)"""

    id: str
    email: str
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
    user_role: Optional[int] = None
    is_block: bool = False
    updated_at: Optional[str] = None

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        return cls(**user.model_dump(exclude={"password"}))


class UserListResponse(BaseModel):
    """用户列表响应"""

    users: list[UserResponse] = Field(default_factory=list, description="用户列表")
    total: int = Field(default=0, description="总数")
    page: int = Field(default=1, description="当前页码")
    limit: int = Field(default=10, description="每页数量")
