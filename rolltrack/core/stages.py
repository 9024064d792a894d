"""卷材工段模型

工段固定为 film -> printing -> cutting -> done -> archived，只能向前推进。
工段值来自外部系统，遇到未知值时返回中性的默认显示信息，不抛异常。
"""

import logging
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel

logger = logging.getLogger(__name__)


class RollStage(str, Enum):
    film = "film"
    printing = "printing"
    cutting = "cutting"
    done = "done"
    archived = "archived"


STAGE_SEQUENCE = (
    RollStage.film,
    RollStage.printing,
    RollStage.cutting,
    RollStage.done,
    RollStage.archived,
)

# 到达切割工段后才有切后重量和废料
CUT_METRIC_STAGES = frozenset({RollStage.cutting, RollStage.done, RollStage.archived})
CUTTING_COMPLETE_STAGES = frozenset({RollStage.done, RollStage.archived})


class StageInfo(BaseModel):
    """工段显示信息，label_key 交给本地化层翻译"""
    value: str
    label_key: str
    badge_variant: str
    icon: str
    known: bool = True


_STAGE_DISPLAY = {
    RollStage.film: ("secondary", "film"),
    RollStage.printing: ("default", "printer"),
    RollStage.cutting: ("outline", "scissors"),
    RollStage.done: ("success", "check-circle"),
    RollStage.archived: ("secondary", "package"),
}

UNKNOWN_STAGE_LABEL_KEY = "production.rolls.stages.unknown"
DEFAULT_BADGE_VARIANT = "default"
DEFAULT_STAGE_ICON = "package"


def parse_stage(value: Any) -> Optional[RollStage]:
    """把字符串转换为 RollStage，未知值返回 None"""
    if isinstance(value, RollStage):
        return value
    if value is None:
        return None
    try:
        return RollStage(str(value))
    except ValueError:
        logger.debug("未知工段值 %r", value)
        return None


def stage_label_key(stage: RollStage) -> str:
    return f"production.rolls.stages.{stage.value}"


def describe_stage(value: Any) -> StageInfo:
    """返回工段的显示信息；未知工段使用默认标签和图标"""
    stage = parse_stage(value)
    if stage is None:
        return StageInfo(
            value="" if value is None else str(value),
            label_key=UNKNOWN_STAGE_LABEL_KEY,
            badge_variant=DEFAULT_BADGE_VARIANT,
            icon=DEFAULT_STAGE_ICON,
            known=False,
        )
    variant, icon = _STAGE_DISPLAY[stage]
    return StageInfo(
        value=stage.value,
        label_key=stage_label_key(stage),
        badge_variant=variant,
        icon=icon,
    )


def list_stages():
    """按流转顺序列出全部工段的显示信息"""
    return [describe_stage(stage) for stage in STAGE_SEQUENCE]


def stage_index(value: Any) -> int:
    """工段在流转序列中的位置，未知工段返回 -1"""
    stage = parse_stage(value)
    if stage is None:
        return -1
    return STAGE_SEQUENCE.index(stage)


def next_stage(value: Any) -> Optional[RollStage]:
    """下一个工段；archived 或未知工段返回 None"""
    idx = stage_index(value)
    if idx < 0 or idx + 1 >= len(STAGE_SEQUENCE):
        return None
    return STAGE_SEQUENCE[idx + 1]


def can_advance(current: Any, target: Any) -> bool:
    """target 是否严格位于 current 之后"""
    current_idx = stage_index(current)
    target_idx = stage_index(target)
    if current_idx < 0 or target_idx < 0:
        return False
    return target_idx > current_idx


def has_cut_metrics(value: Any) -> bool:
    """该工段的卷材是否应带有切后重量和废料数据"""
    return parse_stage(value) in CUT_METRIC_STAGES


def is_cutting_complete(value: Any) -> bool:
    return parse_stage(value) in CUTTING_COMPLETE_STAGES
