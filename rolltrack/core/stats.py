"""统计汇总

供仪表盘卡片使用的计数与重量合计。输入可以为空或只加载了一部分，结果全部为 0 而不报错。
"""

from typing import Any, Dict, Iterable, Optional

from pydantic import BaseModel

from ..utils.helpers import get_field, parse_decimal
from .order_status import OrderStatus, parse_status
from .stages import STAGE_SEQUENCE, parse_stage


class RollStats(BaseModel):
    by_stage: Dict[str, int]
    total: int = 0
    total_weight: float = 0.0
    total_cut_weight: float = 0.0
    total_waste: float = 0.0


def summarize_rolls(rolls: Optional[Iterable[Any]]) -> RollStats:
    """按工段计数并累计重量；重量无法解析时按 0 计

    未知工段的卷材计入 total，但不进入任何工段桶。
    """
    by_stage = {stage.value: 0 for stage in STAGE_SEQUENCE}
    total = 0
    weight = cut_weight = waste = 0.0
    for roll in rolls or []:
        total += 1
        stage = parse_stage(get_field(roll, "stage"))
        if stage is not None:
            by_stage[stage.value] += 1
        weight += parse_decimal(get_field(roll, "weight_kg"))
        cut_weight += parse_decimal(get_field(roll, "cut_weight_total_kg"))
        waste += parse_decimal(get_field(roll, "waste_kg"))
    return RollStats(
        by_stage=by_stage,
        total=total,
        total_weight=weight,
        total_cut_weight=cut_weight,
        total_waste=waste,
    )


class OrderStats(BaseModel):
    total_orders: int = 0
    by_status: Dict[str, int]
    production_in_progress: int = 0
    production_completed: int = 0


def summarize_orders(
    orders: Optional[Iterable[Any]], production_orders: Optional[Iterable[Any]] = None
) -> OrderStats:
    """订单卡片统计：订单总数、各状态订单数、进行中/已完成生产单数"""
    by_status = {status.value: 0 for status in OrderStatus}
    total = 0
    for order in orders or []:
        total += 1
        status = parse_status(get_field(order, "status"))
        if status is not None:
            by_status[status.value] += 1

    in_progress = completed = 0
    for po in production_orders or []:
        status = get_field(po, "status")
        if status == "in_progress":
            in_progress += 1
        elif status == "completed":
            completed += 1

    return OrderStats(
        total_orders=total,
        by_status=by_status,
        production_in_progress=in_progress,
        production_completed=completed,
    )
