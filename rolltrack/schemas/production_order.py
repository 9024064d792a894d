"""生产单数据结构定义

数量与百分比字段允许数字或十进制字符串（与上游接口一致），核心逻辑解析失败时按 0 处理。
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union

DecimalLike = Optional[Union[float, str]]


class ProductionOrderCreate(BaseModel):
    """随订单一起创建的生产单"""
    customer_product_id: Optional[int] = None
    item_name: Optional[str] = None
    item_name_ar: Optional[str] = None
    size_caption: Optional[str] = None
    quantity_kg: float = Field(..., gt=0)
    overrun_percentage: Optional[float] = Field(None, ge=0, le=100)


class ProductionOrderProgressUpdate(BaseModel):
    """各工段完成百分比更新，范围校验在入库时完成"""
    film_completion_percentage: Optional[float] = Field(None, ge=0, le=100)
    printing_completion_percentage: Optional[float] = Field(None, ge=0, le=100)
    cutting_completion_percentage: Optional[float] = Field(None, ge=0, le=100)
    status: Optional[str] = None


class ProductionOrderRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    production_order_number: Optional[str] = None
    order_id: int
    customer_product_id: Optional[int] = None
    item_name: Optional[str] = None
    item_name_ar: Optional[str] = None
    size_caption: Optional[str] = None
    quantity_kg: DecimalLike = None
    overrun_percentage: DecimalLike = None
    final_quantity_kg: DecimalLike = None
    film_completion_percentage: DecimalLike = None
    printing_completion_percentage: DecimalLike = None
    cutting_completion_percentage: DecimalLike = None
    status: Optional[str] = None
