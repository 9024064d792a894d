"""客户数据库模型"""

from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from ..database.connection import Base


class Customer(Base):
    """客户表"""
    __tablename__ = "customers"

    id = Column(String(20), primary_key=True, index=True)  # 客户编号，如 CID001
    name = Column(String(255), nullable=False)
    name_ar = Column(String(255), nullable=True)  # 阿拉伯语名称

    orders = relationship("Order", back_populates="customer")
