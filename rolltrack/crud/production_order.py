"""数据库操作（CRUD）- 生产单相关"""

from typing import Optional

from sqlalchemy.orm import Session
from .. import models, schemas


def list_production_orders(db: Session, order_id: Optional[int] = None):
    query = db.query(models.ProductionOrder)
    if order_id is not None:
        query = query.filter(models.ProductionOrder.order_id == order_id)
    return query.order_by(models.ProductionOrder.id).all()


def get_production_order(db: Session, production_order_id: int):
    return db.query(models.ProductionOrder).filter(models.ProductionOrder.id == production_order_id).first()


def update_progress(db: Session, production_order_id: int, progress: schemas.ProductionOrderProgressUpdate):
    """更新各工段完成百分比"""
    db_po = get_production_order(db, production_order_id)
    if not db_po:
        return None

    update_data = progress.model_dump(exclude_unset=True)
    for field, value in update_data.items():
        setattr(db_po, field, value)

    db.commit()
    db.refresh(db_po)
    return db_po
