import logging

from app.application.errors.exceptions import AppException
from app.domain.repositories.exceptions import (
    InternalRepositoryError,
    NotFoundError as RepositoryNotFoundError,
)
from app.interfaces.schemas import Response
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException

logger = logging.getLogger(__name__)


def register_exception_handlers(app: FastAPI) -> None:
    """统一处理项目中的所有异常，涵盖：业务异常、仓储异常、HTTP异常、参数校验异常、通用异常"""

    @app.exception_handler(AppException)
    async def app_exception_handler(
        request: Request, exc: AppException
    ) -> JSONResponse:
        """自定义应用异常处理器，捕获AppException并返回标准化响应"""

        logger.error(f"App exception: {exc.msg}")

        return JSONResponse(
            status_code=exc.status_code,
            content=Response.fail(code=exc.code, msg=exc.msg, data=exc.data),
        )

    @app.exception_handler(RepositoryNotFoundError)
    async def not_found_handler(
        request: Request, exc: RepositoryNotFoundError
    ) -> JSONResponse:
        """记录不存在，返回404"""

        logger.warning(f"Not found: {exc.msg}")

        return JSONResponse(
            status_code=404,
            content=Response.fail(code=404, msg=exc.msg),
        )

    @app.exception_handler(InternalRepositoryError)
    async def repository_error_handler(
        request: Request, exc: InternalRepositoryError
    ) -> JSONResponse:
        """仓储内部异常，返回500且不暴露底层细节"""

        logger.error(f"Repository error: {exc.msg}", exc_info=exc.cause)

        return JSONResponse(
            status_code=500,
            content=Response.fail(code=500, msg="Internal Server Error"),
        )

    @app.exception_handler(HTTPException)
    async def http_exception_handler(
        request: Request, exc: HTTPException
    ) -> JSONResponse:
        """HTTP异常处理器，捕获HTTPException并返回标准化响应"""

        logger.error(f"HTTP exception: {exc.detail}")

        return JSONResponse(
            status_code=exc.status_code,
            content=Response.fail(code=exc.status_code, msg=str(exc.detail)),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """请求参数校验异常，返回422及错误明细"""

        logger.warning(f"Validation error: {exc.errors()}")

        return JSONResponse(
            status_code=422,
            content=Response.fail(
                code=422,
                msg="请求参数校验失败",
                data=jsonable_encoder(exc.errors()),
            ),
        )

    @app.exception_handler(Exception)
    async def exception_handler(request: Request, exc: Exception) -> JSONResponse:
        """通用异常处理器，捕获所有未处理的异常并返回标准化响应, 状态码500"""
        logger.error(f"Unhandled exception: {exc}", exc_info=True)

        return JSONResponse(
            status_code=500,
            content=Response.fail(code=500, msg="Internal Server Error"),
        )
