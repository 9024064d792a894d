"""工段与订单状态的参考数据，供界面渲染徽章与菜单"""

from typing import List

from fastapi import APIRouter
from pydantic import BaseModel

from ...core.order_status import MANUAL_TRANSITION_TARGETS, StatusInfo, describe_status, list_statuses
from ...core.stages import StageInfo, list_stages

router = APIRouter(tags=["reference"])


class StatusReference(BaseModel):
    statuses: List[StatusInfo]
    manual_targets: List[StatusInfo]


@router.get("/stages", response_model=List[StageInfo])
def stages_endpoint():
    return list_stages()


@router.get("/order-statuses", response_model=StatusReference)
def order_statuses_endpoint():
    return StatusReference(
        statuses=list_statuses(),
        manual_targets=[describe_status(s) for s in MANUAL_TRANSITION_TARGETS],
    )
