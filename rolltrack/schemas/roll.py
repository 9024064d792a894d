"""卷材数据结构定义"""

from datetime import datetime
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field

from ..core.stats import RollStats


class RollCreate(BaseModel):
    """在吹膜工段登记新卷材"""
    production_order_id: int
    weight_kg: float = Field(..., gt=0)
    film_machine_name: Optional[str] = None
    created_by_name: Optional[str] = None


class RollAdvance(BaseModel):
    """推进到下一工段；离开切割工段时记录切后重量与废料"""
    machine_name: Optional[str] = None
    operator_name: Optional[str] = None
    cut_weight_total_kg: Optional[float] = Field(None, ge=0)
    waste_kg: Optional[float] = Field(None, ge=0)


class RollRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    roll_number: str
    roll_seq: int
    production_order_id: int
    stage: str
    weight_kg: str
    cut_weight_total_kg: Optional[str] = None
    waste_kg: Optional[str] = None
    created_at: Optional[datetime] = None
    printed_at: Optional[datetime] = None
    cut_completed_at: Optional[datetime] = None


class RollRecord(BaseModel):
    """卷材扁平记录，附带生产单/订单/客户的冗余显示字段"""
    roll_id: int
    roll_number: str
    roll_seq: int
    stage: str
    weight_kg: Optional[Union[float, str]] = None
    cut_weight_total_kg: Optional[Union[float, str]] = None
    waste_kg: Optional[Union[float, str]] = None
    created_at: Optional[datetime] = None
    printed_at: Optional[datetime] = None
    cut_completed_at: Optional[datetime] = None
    production_order_id: int
    production_order_number: str
    order_id: int
    order_number: str
    customer_id: str
    customer_name: Optional[str] = None
    customer_name_ar: Optional[str] = None
    item_name: Optional[str] = None
    item_name_ar: Optional[str] = None
    size_caption: Optional[str] = None
    film_machine_name: Optional[str] = None
    printing_machine_name: Optional[str] = None
    cutting_machine_name: Optional[str] = None
    created_by_name: Optional[str] = None
    printed_by_name: Optional[str] = None
    cut_by_name: Optional[str] = None


class RollSearchResponse(BaseModel):
    rolls: List[RollRecord]
    stats: RollStats
