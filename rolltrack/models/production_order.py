"""生产单数据库模型

一张订单下可以有多张生产单，每张生产单对应一个产品线
"""

from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from ..database.connection import Base


class ProductionOrder(Base):
    """生产单表"""
    __tablename__ = "production_orders"

    id = Column(Integer, primary_key=True, index=True)
    production_order_number = Column(String(50), unique=True, nullable=False)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    customer_product_id = Column(Integer, nullable=True)
    item_name = Column(String(255), nullable=True)
    item_name_ar = Column(String(255), nullable=True)
    size_caption = Column(String(100), nullable=True)
    quantity_kg = Column(Float, nullable=False)  # 需求数量（kg）
    overrun_percentage = Column(Float, nullable=False, default=5.0)  # 超产比例（%）
    final_quantity_kg = Column(Float, nullable=False)  # quantity_kg * (1 + overrun/100)
    # 各工段完成百分比
    film_completion_percentage = Column(Float, nullable=True, default=0)
    printing_completion_percentage = Column(Float, nullable=True, default=0)
    cutting_completion_percentage = Column(Float, nullable=True, default=0)
    status = Column(String(30), nullable=False, default="pending")

    order = relationship("Order", back_populates="production_orders")
    rolls = relationship(
        "Roll",
        back_populates="production_order",
        cascade="all, delete-orphan",
        order_by="Roll.roll_seq",
    )
