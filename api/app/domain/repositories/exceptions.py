"""仓储层异常定义，所有存储后端统一对外暴露这两类异常"""

from typing import Optional


class RepositoryError(Exception):
    """仓储异常基类"""


class NotFoundError(RepositoryError):
    """记录不存在异常"""

    def __init__(self, entity: str = "User", msg: Optional[str] = None) -> None:
        self.entity = entity
        self.msg = msg or f"{entity} not found"
        super().__init__(self.msg)


class InternalRepositoryError(RepositoryError):
    """仓储内部异常，包装底层存储抛出的原始异常"""

    def __init__(self, cause: BaseException) -> None:
        self.cause = cause
        self.msg = f"Repository internal error: {cause}"
        super().__init__(self.msg)
