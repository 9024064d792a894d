"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from ..database.connection import Base
from .customer import Customer
from .order import Order
from .production_order import ProductionOrder
from .roll import Roll

__all__ = ["Base", "Customer", "Order", "ProductionOrder", "Roll"]
