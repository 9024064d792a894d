"""API数据模型模块

定义所有 Pydantic 模型（请求/响应结构体）
"""

from .customer import CustomerCreate, CustomerRead
from .production_order import ProductionOrderCreate, ProductionOrderProgressUpdate, ProductionOrderRead
from .order import OrderCreate, OrderRead, OrderStatusUpdate
from .roll import RollCreate, RollAdvance, RollRead, RollRecord, RollSearchResponse
from .overview import OrderOverview

__all__ = [
    "CustomerCreate",
    "CustomerRead",
    "ProductionOrderCreate",
    "ProductionOrderProgressUpdate",
    "ProductionOrderRead",
    "OrderCreate",
    "OrderRead",
    "OrderStatusUpdate",
    "RollCreate",
    "RollAdvance",
    "RollRead",
    "RollRecord",
    "RollSearchResponse",
    "OrderOverview",
]
