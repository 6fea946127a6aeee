"""用户 ORM 模型"""

import uuid
from typing import Optional

from app.domain.models.user import User, UserInput
from sqlalchemy import Integer, PrimaryKeyConstraint, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class UserModel(Base):
    """用户数据 ORM 模型，每个用户字段对应一列，布尔字段以 0/1 存储"""

    __tablename__ = "users"
    __table_args__ = (PrimaryKeyConstraint("id", name="pk_users_id"),)

    id: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        primary_key=True,
        default=lambda: str(uuid.uuid4()),
    )
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True)
    password: Mapped[str] = mapped_column(String(255), nullable=False)
    email_verified: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    picture: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    phone: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    city: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    address: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    age: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    gender: Mapped[Optional[str]] = mapped_column(String(32), nullable=True)
    father_name: Mapped[Optional[str]] = mapped_column(String(255), nullable=True)
    join_date: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)
    user_role: Mapped[Optional[int]] = mapped_column(Integer, nullable=True)
    is_block: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    updated_at: Mapped[Optional[str]] = mapped_column(String(64), nullable=True)

    @classmethod
    def from_domain(cls, user_id: str, data: UserInput) -> "UserModel":
        """从领域输入数据创建 ORM 模型"""
        return cls(
            id=user_id,
            email=data.email,
            password=data.password,
            email_verified=1 if data.email_verified else 0,
            name=data.name,
            picture=data.picture,
            phone=data.phone,
            city=data.city,
            address=data.address,
            age=data.age,
            gender=data.gender,
            father_name=data.father_name,
            join_date=data.join_date,
            user_role=data.user_role,
            is_block=1 if data.is_block else 0,
            updated_at=data.updated_at,
        )

    def to_domain(self, with_password: bool = False) -> User:
        """将 ORM 模型转换为领域模型"""
        user = User(
            id=self.id,
            email=self.email,
            password=self.password,
            email_verified=bool(self.email_verified),
            name=self.name,
            picture=self.picture,
            phone=self.phone,
            city=self.city,
            address=self.address,
            age=self.age,
            gender=self.gender,
            father_name=self.father_name,
            join_date=self.join_date,
            user_role=self.user_role,
            is_block=bool(self.is_block),
            updated_at=self.updated_at,
        )
        return user if with_password else user.without_password()
