"""订单状态控制

订单状态只由用户显式操作变更，不根据生产完成度自动推断。
控制器不限制状态之间的迁移，提供哪些目标状态由调用方决定；
它只负责：替换状态、保留其余字段不变，并把持久化失败与校验失败区分开。
"""

import copy
import dataclasses
import logging
from collections.abc import Mapping
from enum import Enum
from typing import Any, Callable, Optional

from pydantic import BaseModel

from ..utils.helpers import get_field

logger = logging.getLogger(__name__)


class OrderStatus(str, Enum):
    waiting = "waiting"
    pending = "pending"
    for_production = "for_production"
    in_production = "in_production"
    paused = "paused"
    on_hold = "on_hold"
    completed = "completed"
    received = "received"
    delivered = "delivered"
    cancelled = "cancelled"


# 订单列表"变更状态"菜单提供的目标状态
MANUAL_TRANSITION_TARGETS = (
    OrderStatus.for_production,
    OrderStatus.on_hold,
    OrderStatus.pending,
    OrderStatus.completed,
)


class StatusInfo(BaseModel):
    value: str
    label_key: str
    color: str
    badge_variant: str
    known: bool = True


_STATUS_DISPLAY = {
    OrderStatus.waiting: ("yellow", "secondary"),
    OrderStatus.pending: ("yellow", "secondary"),
    OrderStatus.for_production: ("blue", "default"),
    OrderStatus.in_production: ("blue", "default"),
    OrderStatus.paused: ("red", "destructive"),
    OrderStatus.on_hold: ("red", "destructive"),
    OrderStatus.completed: ("green", "default"),
    OrderStatus.received: ("purple", "default"),
    OrderStatus.delivered: ("gray", "default"),
    OrderStatus.cancelled: ("red", "destructive"),
}

UNKNOWN_STATUS_LABEL_KEY = "orders.status.unknown"


def parse_status(value: Any) -> Optional[OrderStatus]:
    if isinstance(value, OrderStatus):
        return value
    if value is None:
        return None
    try:
        return OrderStatus(str(value))
    except ValueError:
        logger.debug("未知订单状态 %r", value)
        return None


def describe_status(value: Any) -> StatusInfo:
    """状态徽章信息，未知状态使用灰色轮廓徽章"""
    status = parse_status(value)
    if status is None:
        return StatusInfo(
            value="" if value is None else str(value),
            label_key=UNKNOWN_STATUS_LABEL_KEY,
            color="gray",
            badge_variant="outline",
            known=False,
        )
    color, variant = _STATUS_DISPLAY[status]
    return StatusInfo(
        value=status.value,
        label_key=f"orders.status.{status.value}",
        color=color,
        badge_variant=variant,
    )


def list_statuses():
    return [describe_status(status) for status in OrderStatus]


class TransitionOutcome(str, Enum):
    ok = "ok"
    invalid_status = "invalid_status"
    invalid_order = "invalid_order"
    persistence_failed = "persistence_failed"


class TransitionResult(BaseModel):
    outcome: TransitionOutcome
    order: Any = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.outcome == TransitionOutcome.ok


def with_status(order: Any, status: OrderStatus) -> Any:
    """返回替换了 status 的订单副本，不修改传入对象

    - pydantic 模型：model_copy
    - 字典：浅拷贝为 dict
    - ORM 行：按映射列生成字段快照 dict，不触碰会话中的对象
    - dataclass 与普通对象：浅拷贝后替换 status
    """
    if isinstance(order, BaseModel):
        return order.model_copy(update={"status": status.value})
    if isinstance(order, Mapping):
        updated = dict(order)
        updated["status"] = status.value
        return updated
    mapper = getattr(type(order), "__mapper__", None)
    if mapper is not None:
        updated = {attr.key: getattr(order, attr.key) for attr in mapper.column_attrs}
        updated["status"] = status.value
        return updated
    if dataclasses.is_dataclass(order):
        return dataclasses.replace(order, status=status.value)
    if hasattr(order, "__dict__") and hasattr(order, "status"):
        updated = copy.copy(order)
        updated.status = status.value
        return updated
    raise TypeError(f"不支持的订单记录类型: {type(order).__name__}")


def transition_order_status(
    order: Any,
    target_status: Any,
    persist: Optional[Callable[[Any], Any]] = None,
) -> TransitionResult:
    """把订单迁移到目标状态

    参数：
      - order: 订单记录（pydantic 模型、字典、ORM 行或带 status 属性的对象）
      - target_status: 目标状态值
      - persist: 可选的持久化回调，接收更新后的订单；抛出异常视为持久化失败，本函数不重试
    """
    status = parse_status(target_status)
    if status is None:
        return TransitionResult(
            outcome=TransitionOutcome.invalid_status,
            order=order,
            error=f"unknown order status: {target_status!r}",
        )

    ref = get_field(order, "order_number") or get_field(order, "id")
    try:
        updated = with_status(order, status)
    except (TypeError, ValueError) as exc:
        logger.warning("订单 %s 无法变更状态: %s", ref, exc)
        return TransitionResult(
            outcome=TransitionOutcome.invalid_order,
            order=order,
            error=str(exc),
        )
    if persist is not None:
        try:
            persist(updated)
        except Exception as exc:
            logger.exception("订单 %s 状态更新持久化失败", ref)
            return TransitionResult(
                outcome=TransitionOutcome.persistence_failed,
                order=order,
                error=str(exc) or exc.__class__.__name__,
            )

    logger.info("订单 %s 状态 %s -> %s", ref, get_field(order, "status"), status.value)
    return TransitionResult(outcome=TransitionOutcome.ok, order=updated)
