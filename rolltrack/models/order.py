"""订单模型定义"""

from sqlalchemy import Column, Integer, String, DateTime, Text, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from ..database.connection import Base


class Order(Base):
    """订单模型"""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    # 显示用订单号，不保证数值有序
    order_number = Column(String(50), unique=True, nullable=False, index=True)
    customer_id = Column(String(20), ForeignKey("customers.id"), nullable=False)
    created_by = Column(String(50), nullable=True)
    created_at = Column(DateTime, server_default=func.now())
    # 交货期（天），1 ~ 365
    delivery_days = Column(Integer, nullable=True)
    notes = Column(Text, nullable=True)
    status = Column(String(30), nullable=False, default="waiting")

    customer = relationship("Customer", back_populates="orders")
    production_orders = relationship(
        "ProductionOrder",
        back_populates="order",
        cascade="all, delete-orphan",
        order_by="ProductionOrder.id",
    )
