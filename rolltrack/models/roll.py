"""卷材数据库模型

卷材是车间流转的最小物理单元，按 film -> printing -> cutting -> done -> archived 顺序推进
"""

from sqlalchemy import Column, Integer, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class Roll(Base):
    """卷材表"""
    __tablename__ = "rolls"

    id = Column(Integer, primary_key=True, index=True)
    roll_number = Column(String(80), unique=True, nullable=False, index=True)
    roll_seq = Column(Integer, nullable=False)  # 生产单内序号
    production_order_id = Column(Integer, ForeignKey("production_orders.id"), nullable=False)
    stage = Column(String(20), nullable=False, default="film")
    # 重量按车间终端上报的十进制字符串保存
    weight_kg = Column(String(20), nullable=False)
    cut_weight_total_kg = Column(String(20), nullable=True)
    waste_kg = Column(String(20), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    printed_at = Column(DateTime, nullable=True)
    cut_completed_at = Column(DateTime, nullable=True)
    # 机台与操作员显示名称
    film_machine_name = Column(String(100), nullable=True)
    printing_machine_name = Column(String(100), nullable=True)
    cutting_machine_name = Column(String(100), nullable=True)
    created_by_name = Column(String(100), nullable=True)
    printed_by_name = Column(String(100), nullable=True)
    cut_by_name = Column(String(100), nullable=True)

    production_order = relationship("ProductionOrder", back_populates="rolls")
