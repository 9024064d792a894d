"""应用模块入口

提供统一的模块导入接口
"""

from . import (
    config,
    core,
    crud,
    db,
    models,
    schemas,
)

# 从子模块导入关键组件
from .config.settings import settings
from .db import get_db, engine, Base
from .core import (
    compute_delivery_info,
    aggregate_completion,
    filter_rolls,
    summarize_rolls,
    transition_order_status,
)

__all__ = [
    "config",
    "core",
    "crud",
    "db",
    "models",
    "schemas",
    "settings",
    "get_db",
    "engine",
    "Base",
    "compute_delivery_info",
    "aggregate_completion",
    "filter_rolls",
    "summarize_rolls",
    "transition_order_status",
]
