"""交货期计算

交货日期 = 订单创建日期 + 交货期天数（按自然日，时分秒归零）
剩余天数 = 交货日期 - 今天（均为零点），同一天为 0，负数表示已延期。
缺少创建时间或交货期时返回 undetermined，调用方不能把它当作按期。
"""

from datetime import date, timedelta
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, computed_field

from ..utils.helpers import get_field, parse_int, to_date


class DeliveryState(str, Enum):
    on_track = "on_track"
    due_today = "due_today"
    late = "late"
    undetermined = "undetermined"


class DeliveryInfo(BaseModel):
    state: DeliveryState
    delivery_date: Optional[date] = None
    days_remaining: Optional[int] = None

    @computed_field
    @property
    def days_late(self) -> int:
        if self.days_remaining is None or self.days_remaining >= 0:
            return 0
        return -self.days_remaining

    @computed_field
    @property
    def label_key(self) -> str:
        return f"orders.delivery.{self.state.value}"

    @property
    def is_determined(self) -> bool:
        return self.state != DeliveryState.undetermined


def delivery_date_for(created_at: Any, delivery_days: Any) -> Optional[date]:
    """根据创建时间和交货期计算交货日期，无法确定时返回 None"""
    created = to_date(created_at)
    days = parse_int(delivery_days)
    if created is None or days is None or days <= 0:
        return None
    return created + timedelta(days=days)


def classify_days_remaining(days_remaining: int) -> DeliveryState:
    if days_remaining > 0:
        return DeliveryState.on_track
    if days_remaining == 0:
        return DeliveryState.due_today
    return DeliveryState.late


def compute_delivery_info(order: Any, today: Optional[date] = None) -> DeliveryInfo:
    """计算订单的交货日期与剩余天数

    参数：
      - order: 带 created_at 与 delivery_days 字段的订单记录（对象或字典）
      - today: 基准日期，默认取当天
    """
    delivery_date = delivery_date_for(
        get_field(order, "created_at"), get_field(order, "delivery_days")
    )
    if delivery_date is None:
        return DeliveryInfo(state=DeliveryState.undetermined)

    base = to_date(today) if today is not None else date.today()
    days_remaining = (delivery_date - base).days
    return DeliveryInfo(
        state=classify_days_remaining(days_remaining),
        delivery_date=delivery_date,
        days_remaining=days_remaining,
    )
