"""订单完成度汇总

把一张订单下多张生产单的各工段完成百分比，按数量加权汇总为订单级百分比：

    qty_i      = final_quantity_kg_i，缺失时取 quantity_kg_i，都缺失为 0
    result_s   = Σ(qty_i * pct_s_i) / Σ qty_i      （Σ qty_i 为 0 时结果为 0）

某生产单缺少某工段百分比时该工段按 0 计，但仍计入分母。
结果不做 [0, 100] 截断，越界数据原样透出。
"""

from collections import defaultdict
from typing import Any, Dict, Iterable

from pydantic import BaseModel, computed_field

from ..config.settings import settings
from ..utils.helpers import get_field, is_present, parse_decimal

COMPLETION_STAGES = ("film", "printing", "cutting")


class StageCompletion(BaseModel):
    film: float = 0.0
    printing: float = 0.0
    cutting: float = 0.0
    production_order_count: int = 0
    total_quantity_kg: float = 0.0

    @computed_field
    @property
    def has_production_orders(self) -> bool:
        """为 False 时界面应显示"尚未生产"，而不是 0%"""
        return self.production_order_count > 0


def final_quantity(quantity_kg: Any, overrun_percentage: Any = None) -> float:
    """含超产的最终数量：quantity * (1 + overrun / 100)"""
    if not is_present(overrun_percentage):
        overrun_percentage = settings.DEFAULT_OVERRUN_PERCENTAGE
    return parse_decimal(quantity_kg) * (1 + parse_decimal(overrun_percentage) / 100.0)


def production_order_quantity(production_order: Any) -> float:
    """加权用数量：优先 final_quantity_kg，其次 quantity_kg"""
    final_qty = get_field(production_order, "final_quantity_kg")
    if is_present(final_qty):
        return parse_decimal(final_qty)
    return parse_decimal(get_field(production_order, "quantity_kg"))


def stage_percentage(production_order: Any, stage: str) -> float:
    return parse_decimal(get_field(production_order, f"{stage}_completion_percentage"))


def weighted_completion(production_orders: Iterable[Any]) -> StageCompletion:
    """对给定生产单做数量加权平均"""
    count = 0
    total_qty = 0.0
    weighted = dict.fromkeys(COMPLETION_STAGES, 0.0)
    for po in production_orders:
        count += 1
        qty = production_order_quantity(po)
        total_qty += qty
        for stage in COMPLETION_STAGES:
            weighted[stage] += qty * stage_percentage(po, stage)

    if total_qty > 0:
        result = {stage: weighted[stage] / total_qty for stage in COMPLETION_STAGES}
    else:
        result = dict.fromkeys(COMPLETION_STAGES, 0.0)
    return StageCompletion(production_order_count=count, total_quantity_kg=total_qty, **result)


def _belongs_to(production_order: Any, order_id: Any) -> bool:
    # 没有 order_id 的生产单视为调用方已按订单筛选过
    po_order_id = get_field(production_order, "order_id")
    return not is_present(po_order_id) or str(po_order_id) == str(order_id)


def aggregate_completion(order: Any, production_orders: Iterable[Any]) -> StageCompletion:
    """计算某订单的各工段完成度

    production_orders 可以是全部生产单，这里剔除 order_id 属于其他订单的生产单；
    不带 order_id 的生产单，或 order 没有 id 时，视为调用方已经筛选好。
    """
    order_id = get_field(order, "id")
    if order_id is None:
        return weighted_completion(production_orders)
    related = [po for po in production_orders if _belongs_to(po, order_id)]
    return weighted_completion(related)


def aggregate_completion_by_order(
    orders: Iterable[Any], production_orders: Iterable[Any]
) -> Dict[Any, StageCompletion]:
    """一次分组，批量计算多张订单的完成度，键为订单 id"""
    grouped = defaultdict(list)
    for po in production_orders:
        order_id = get_field(po, "order_id")
        if order_id is not None:
            grouped[str(order_id)].append(po)

    result: Dict[Any, StageCompletion] = {}
    for order in orders:
        order_id = get_field(order, "id")
        result[order_id] = weighted_completion(grouped.get(str(order_id), []))
    return result
