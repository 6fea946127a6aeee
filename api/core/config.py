from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """应用程序的配置设置，继承自Pydantic的BaseSettings。从.env或者环境变量中加载配置。"""

    # 项目基础配置
    env: str = "development"  # 应用环境，默认为'development'
    log_level: str = "INFO"  # 日志级别，默认为'INFO'
    app_key: str = ""  # 应用密钥，启动时必须配置

    # 运行模式: local 使用 SQLite，production(及其他取值) 使用 MongoDB
    app_mode: str = "production"

    # SQLite配置
    sqlite_database_path: str = "data/data.db"

    # MongoDB配置
    mongo_url: str = "mongodb://localhost:27017"
    mongo_db_name: str = "user-crud-server"
    mongo_ensure_email_index: bool = False  # 是否在启动时创建email唯一索引

    # 使用pydantic v2的写法来完成环境变量信息的告知
    model_config = SettingsConfigDict(
        env_file=".env", env_file_encoding="utf-8", extra="ignore"
    )

    @property
    def use_sqlite(self) -> bool:
        """是否使用本地SQLite存储"""
        return self.app_mode.lower() == "local"


@lru_cache()
def get_settings() -> Settings:
    """获取应用程序的配置设置实例，使用lru_cache进行缓存以提高性能。

    Returns:
        Settings: 应用程序的配置设置实例。
    """
    return Settings()
