"""订单概览数据结构：订单 + 交货期 + 完成度"""

from pydantic import BaseModel

from ..core.completion import StageCompletion
from ..core.delivery import DeliveryInfo
from .order import OrderRead


class OrderOverview(BaseModel):
    order: OrderRead
    delivery: DeliveryInfo
    completion: StageCompletion
