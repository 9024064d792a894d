"""数据库操作（CRUD）- 订单相关

封装常用的数据库读写操作，便于路由层调用并保持业务逻辑集中。
- create_order 会同时建立 Order 与其下的 ProductionOrder，并计算含超产的最终数量
- update_order_status 是订单状态控制器的持久化回调
"""

import logging

from sqlalchemy.orm import Session
from .. import models, schemas
from ..config.settings import settings
from ..core.completion import final_quantity

logger = logging.getLogger(__name__)


def create_order(db: Session, order: schemas.OrderCreate):
    db_order = models.Order(
        order_number=order.order_number,
        customer_id=order.customer_id,
        created_by=order.created_by,
        delivery_days=order.delivery_days,
        notes=order.notes,
        status=order.status,
    )
    if order.created_at is not None:
        db_order.created_at = order.created_at
    db.add(db_order)
    db.flush()

    # 生产单编号：PO-<订单号>-<序号>
    for idx, po in enumerate(order.production_orders, start=1):
        overrun = po.overrun_percentage
        if overrun is None:
            overrun = settings.DEFAULT_OVERRUN_PERCENTAGE
        db.add(models.ProductionOrder(
            production_order_number=f"PO-{order.order_number}-{idx}",
            order_id=db_order.id,
            customer_product_id=po.customer_product_id,
            item_name=po.item_name,
            item_name_ar=po.item_name_ar,
            size_caption=po.size_caption,
            quantity_kg=po.quantity_kg,
            overrun_percentage=overrun,
            final_quantity_kg=round(final_quantity(po.quantity_kg, overrun), 2),
            film_completion_percentage=0,
            printing_completion_percentage=0,
            cutting_completion_percentage=0,
            status="pending",
        ))
    db.commit()
    db.refresh(db_order)
    logger.info("创建订单 %s，生产单 %d 张", db_order.order_number, len(order.production_orders))
    return db_order


def get_order(db: Session, order_id: int):
    return db.query(models.Order).filter(models.Order.id == order_id).first()


def list_orders(db: Session):
    """获取所有订单，按创建时间倒序"""
    return db.query(models.Order).order_by(models.Order.created_at.desc(), models.Order.id.desc()).all()


def to_order_record(db_order: models.Order) -> schemas.OrderRead:
    """ORM 订单转换为带客户显示名的只读记录"""
    record = schemas.OrderRead.model_validate(db_order)
    if db_order.customer is not None:
        record.customer_name = db_order.customer.name
        record.customer_name_ar = db_order.customer.name_ar
    return record


def update_order_status(db: Session, order_id: int, status: str):
    """只更新状态字段；订单不存在时抛出 LookupError"""
    db_order = get_order(db, order_id)
    if not db_order:
        raise LookupError(f"order {order_id} not found")
    db_order.status = status
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(db_order)
    return db_order


def delete_order(db: Session, order_id: int):
    """删除指定ID的订单，生产单与卷材随之级联删除"""
    order = get_order(db, order_id)
    if order:
        db.delete(order)
        db.commit()
        return True
    return False
