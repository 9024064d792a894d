"""生产跟踪核心逻辑

纯函数实现：工段模型、交货期计算、完成度加权汇总、卷材/订单筛选、订单状态控制、统计汇总。
不做 I/O，不修改传入的数据集合。
"""

from .stages import (
    RollStage,
    STAGE_SEQUENCE,
    StageInfo,
    describe_stage,
    list_stages,
    parse_stage,
    next_stage,
    can_advance,
    has_cut_metrics,
    is_cutting_complete,
)
from .delivery import DeliveryState, DeliveryInfo, compute_delivery_info
from .completion import (
    StageCompletion,
    aggregate_completion,
    aggregate_completion_by_order,
    final_quantity,
    weighted_completion,
)
from .filters import ALL, RollFilter, OrderFilter, filter_rolls, filter_orders
from .order_status import (
    OrderStatus,
    MANUAL_TRANSITION_TARGETS,
    StatusInfo,
    TransitionOutcome,
    TransitionResult,
    describe_status,
    list_statuses,
    parse_status,
    transition_order_status,
)
from .stats import RollStats, OrderStats, summarize_rolls, summarize_orders

__all__ = [
    "RollStage",
    "STAGE_SEQUENCE",
    "StageInfo",
    "describe_stage",
    "list_stages",
    "parse_stage",
    "next_stage",
    "can_advance",
    "has_cut_metrics",
    "is_cutting_complete",
    "DeliveryState",
    "DeliveryInfo",
    "compute_delivery_info",
    "StageCompletion",
    "aggregate_completion",
    "aggregate_completion_by_order",
    "final_quantity",
    "weighted_completion",
    "ALL",
    "RollFilter",
    "OrderFilter",
    "filter_rolls",
    "filter_orders",
    "OrderStatus",
    "MANUAL_TRANSITION_TARGETS",
    "StatusInfo",
    "TransitionOutcome",
    "TransitionResult",
    "describe_status",
    "list_statuses",
    "parse_status",
    "transition_order_status",
    "RollStats",
    "OrderStats",
    "summarize_rolls",
    "summarize_orders",
]
