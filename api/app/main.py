import logging
from contextlib import asynccontextmanager

from app.infrastructure.logging import setup_logging
from app.infrastructure.storage.bootstrap import init_storage, shutdown_storage
from app.interfaces.endpoints.routes import router as api_router
from app.interfaces.errors.exception_handlers import register_exception_handlers
from core.config import get_settings
from fastapi import FastAPI
from starlette.middleware.cors import CORSMiddleware

# 加载配置信息
settings = get_settings()

# 初始化日志记录
setup_logging()
logger = logging.getLogger()

logger.info("应用程序启动中...")

# 定义FastApi路由tags标签
openapi_tags = [
    {
        "name": "用户模块",
        "description": "包含用户信息的 **增删改查** API 接口，支持过滤与分页。",
    }
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """创建FastAPI应用生命周期上下文管理器"""
    # 1.根据运行模式初始化存储后端(SQLite/MongoDB)
    logger.info(f"用户服务正在初始化, 运行模式: {settings.app_mode}")
    await init_storage()
    logger.info("存储后端初始化完成")

    try:
        # 2.lifespan分界点
        yield
    finally:
        # 3.应用关闭前的清理工作
        logger.info("用户服务正在关闭")
        await shutdown_storage()
        logger.info("用户服务关闭成功")


app = FastAPI(
    title="User CRUD Server",
    description="用户信息增删改查服务，支持 MongoDB 与 SQLite 两种可切换的存储后端",
    lifespan=lifespan,
    openapi_tags=openapi_tags,
    version="1.0.0",
)

# 配置CORS中间件，解决跨域问题
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # 允许所有来源
    allow_credentials=True,
    allow_methods=["*"],  # 允许所有方法
    allow_headers=["*"],  # 允许所有头部
)

# 注册全局异常处理器
register_exception_handlers(app)

app.include_router(api_router, prefix="/api")

logger.info("FastAPI应用程序实例已创建。")
