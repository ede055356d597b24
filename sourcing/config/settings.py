"""应用配置模块

使用 Pydantic Settings 管理应用配置，支持从 .env 文件加载环境变量
"""

from pydantic_settings import BaseSettings
from typing import Optional


class Settings(BaseSettings):
    """应用配置类"""

    # 应用配置
    APP_TITLE: str = "Garment Sourcing"
    APP_DESCRIPTION: str = "供应商匹配与报价分配 API"
    APP_VERSION: str = "1.0.0"

    # MySQL 配置 - 从环境变量加载
    MYSQL_USER: str = "root"
    MYSQL_PASSWORD: str = ""
    MYSQL_HOST: str = ""
    MYSQL_PORT: str = "3306"
    MYSQL_DB: str = "sourcing_db"

    # 数据库配置 - 优先使用DATABASE_URL，否则从MySQL配置构建
    DATABASE_URL: str = ""
    ECHO_SQL: bool = False  # 是否打印SQL日志

    # 日志配置
    LOG_LEVEL: str = "INFO"
    LOG_FILE: Optional[str] = None  # 设置后额外写入滚动日志文件

    # 匹配配置
    MATCH_TOP_K: int = 5  # 每个报价展示的推荐供应商数量
    CACHE_TTL_SECONDS: int = 0  # 加载结果缓存时长，默认 0 即每次读取最新数据

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        # 如果没有显式设置DATABASE_URL，从MySQL配置构建
        if not self.DATABASE_URL:
            if self.MYSQL_HOST:
                self.DATABASE_URL = f"mysql+pymysql://{self.MYSQL_USER}:{self.MYSQL_PASSWORD}@{self.MYSQL_HOST}:{self.MYSQL_PORT}/{self.MYSQL_DB}"
            else:
                self.DATABASE_URL = "sqlite:///./dev.db"

    class Config:
        env_file = ".env"  # 从.env文件加载配置


# 创建全局配置实例
settings = Settings()
