from typing import Any, Generic, Optional, TypeVar

from pydantic import BaseModel

T = TypeVar("T")


class Response(BaseModel, Generic[T]):
    """统一响应信封，所有接口都以 {code, msg, data} 的形式返回"""

    code: int = 200  # 业务状态码，与HTTP状态码保持一致
    msg: str = "success"
    data: Optional[T] = None

    @staticmethod
    def success(data: Optional[T] = None, msg: str = "success") -> "Response[T]":
        """构建成功响应，data 为空时序列化为 null"""
        return Response[T](code=200, msg=msg, data=data)

    @staticmethod
    def fail(code: int = 400, msg: str = "fail", data: Optional[Any] = None) -> dict:
        """构建失败响应并直接转为可写入 JSONResponse 的字典，data 缺省为空对象"""
        return Response[Any](
            code=code, msg=msg, data={} if data is None else data
        ).model_dump()
