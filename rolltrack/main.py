"""FastAPI主应用入口

提供订单、生产单、卷材的查询与跟踪接口：
- 订单列表附带交货期与加权完成度
- 卷材多条件筛选与统计
- 订单状态手动变更
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Depends, HTTPException
from sqlalchemy import text
from sqlalchemy.orm import Session

from .api.v1 import (
    orders_router,
    production_orders_router,
    customers_router,
    rolls_router,
    reference_router,
)
from .config.settings import settings
from .database.connection import get_db, init_db

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 开发环境下自动建表
    init_db()
    yield


# 创建FastAPI应用实例
app = FastAPI(
    title=settings.APP_TITLE,
    description=settings.APP_DESCRIPTION,
    version=settings.APP_VERSION,
    lifespan=lifespan,
)

# 挂载API路由
app.include_router(orders_router, prefix="/api/v1")
app.include_router(production_orders_router, prefix="/api/v1")
app.include_router(customers_router, prefix="/api/v1")
app.include_router(rolls_router, prefix="/api/v1")
app.include_router(reference_router, prefix="/api/v1")


# 健康检查端点
@app.get("/health/db")
def health_check(db: Session = Depends(get_db)):
    """检查数据库连接状态"""
    try:
        db.execute(text("SELECT 1"))
        return {"status": "healthy", "database": "reachable"}
    except Exception:
        logger.exception("数据库健康检查失败")
        raise HTTPException(status_code=503, detail="Database connection failed")


# 根路径 - 返回服务状态
@app.get("/")
def read_root():
    """返回服务运行状态"""
    return {"service": settings.APP_TITLE, "version": settings.APP_VERSION, "status": "running"}
