from sqlalchemy import MetaData
from sqlalchemy.orm import declarative_base

# 定义约束命名约定(users表只涉及主键和唯一约束)
naming_convention = {
    "ix": "ix_%(column_0_label)s",
    "uq": "uq_%(table_name)s_%(column_0_name)s",
    "pk": "pk_%(table_name)s",
}

Base = declarative_base(metadata=MetaData(naming_convention=naming_convention))
