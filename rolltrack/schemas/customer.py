"""客户数据结构定义"""

from pydantic import BaseModel, ConfigDict
from typing import Optional


class CustomerBase(BaseModel):
    id: str
    name: str
    name_ar: Optional[str] = None


class CustomerCreate(CustomerBase):
    pass


class CustomerRead(CustomerBase):
    model_config = ConfigDict(from_attributes=True)
