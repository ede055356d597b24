"""FastAPI主应用入口

实现供应商匹配服务的 RESTful API，包含资料管理、报价、订单与供应商匹配等模块
- 使用依赖注入管理数据库会话
- 启动时创建缺失的数据表（正式环境使用 alembic 迁移）
"""

from contextlib import asynccontextmanager

from fastapi import Depends, FastAPI, HTTPException
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .api.v1 import (
    profiles_router,
    quotes_router,
    orders_router,
    matching_router,
)
from .config.settings import settings
from .database.connection import Base, engine, get_db
from .utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        logger.warning("Could not create tables on startup: {}", exc)
    logger.info("{} {} started", settings.APP_TITLE, settings.APP_VERSION)
    yield


# 创建FastAPI应用实例
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# 挂载API路由
app.include_router(profiles_router, prefix="/api/v1", tags=["profiles"])
app.include_router(quotes_router, prefix="/api/v1", tags=["quotes"])
app.include_router(orders_router, prefix="/api/v1", tags=["orders"])
app.include_router(matching_router, prefix="/api/v1", tags=["matching"])


# 健康检查端点
@app.get("/health/db")
def health_check(db: Session = Depends(get_db)):
    """检查数据库连接状态"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "reachable"}
    except SQLAlchemyError:
        raise HTTPException(status_code=503, detail="Database connection failed")


# 根路径 - 返回服务状态
@app.get("/")
def read_root():
    """返回服务运行状态"""
    return {"service": settings.APP_TITLE, "status": "running"}
