"""订单数据结构定义

定义订单相关的Pydantic模型
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..config.settings import settings
from .production_order import ProductionOrderCreate


class OrderBase(BaseModel):
    """订单基础模型"""
    order_number: str
    customer_id: str
    created_by: Optional[str] = None
    delivery_days: Optional[int] = None  # 交货期（天）
    notes: Optional[str] = None


class OrderCreate(OrderBase):
    """创建订单时的模型，至少包含一张生产单"""
    status: str = "waiting"
    created_at: Optional[datetime] = None
    production_orders: List[ProductionOrderCreate] = Field(..., min_length=1)

    @field_validator("delivery_days")
    @classmethod
    def check_delivery_days(cls, value):
        if value is not None and not 1 <= value <= settings.MAX_DELIVERY_DAYS:
            raise ValueError(f"delivery_days must be between 1 and {settings.MAX_DELIVERY_DAYS}")
        return value


class OrderRead(OrderBase):
    """读取订单时的模型，附带客户显示名称"""
    model_config = ConfigDict(from_attributes=True)

    id: int
    status: str
    created_at: Optional[datetime] = None
    customer_name: Optional[str] = None
    customer_name_ar: Optional[str] = None


class OrderStatusUpdate(BaseModel):
    status: str
