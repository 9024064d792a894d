"""数据库连接模块

引擎、会话工厂、模型基类，以及建表/重建表的入口。
- MySQL：连接池开启 pre-ping，断线后自动重连
- SQLite（开发与测试）：允许跨线程使用连接，并在每个连接上开启外键约束
"""

import logging

from sqlalchemy import create_engine, event
from sqlalchemy.orm import declarative_base, sessionmaker
from ..config.settings import settings

logger = logging.getLogger(__name__)


def _engine_options() -> dict:
    options = {"pool_pre_ping": True, "echo": settings.ECHO_SQL}
    if settings.is_sqlite:
        # TestClient 与线程池中的同步路由会跨线程使用同一连接
        options["connect_args"] = {"check_same_thread": False}
    return options


engine = create_engine(settings.DATABASE_URL, **_engine_options())

if settings.is_sqlite:
    @event.listens_for(engine, "connect")
    def _enable_sqlite_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

Base = declarative_base()


def init_db():
    """按当前模型建表，已存在的表不动"""
    from .. import models  # noqa: F401  注册全部表
    Base.metadata.create_all(bind=engine)
    logger.info("数据库表已就绪: %s", settings.DATABASE_URL.split("@")[-1])


def reset_db():
    """删除并重建全部表，仅用于测试与演示数据"""
    from .. import models  # noqa: F401
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)


def get_db():
    """获取数据库会话的依赖函数"""
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
