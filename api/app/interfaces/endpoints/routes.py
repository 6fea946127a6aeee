from fastapi import APIRouter

from . import user_routes


def create_api_routes() -> APIRouter:
    """创建API路由，涵盖整个项目的所有路由管理"""

    api_router = APIRouter()

    # 用户路由
    api_router.include_router(user_routes.router)

    return api_router


router = create_api_routes()
