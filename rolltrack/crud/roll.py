"""数据库操作（CRUD）- 卷材相关

- create_roll 在吹膜工段登记卷材，并在生产单内分配序号与卷号
- advance_roll 把卷材推进到下一工段，只能向前
- list_roll_records 联表生成供筛选与统计使用的扁平记录
"""

import logging
from datetime import datetime
from typing import List

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from .. import models, schemas
from ..core.stages import RollStage, next_stage

logger = logging.getLogger(__name__)

# 卷号冲突时的最大取号次数
ROLL_NUMBER_ATTEMPTS = 3


def format_roll_number(production_order_number: str, seq: int) -> str:
    return f"{production_order_number}-R{seq:03d}"


def next_roll_seq(db: Session, production_order_id: int) -> int:
    last_seq = (
        db.query(func.max(models.Roll.roll_seq))
        .filter(models.Roll.production_order_id == production_order_id)
        .scalar()
    )
    return (last_seq or 0) + 1


def create_roll(db: Session, roll: schemas.RollCreate):
    """登记卷材

    序号取生产单内最大序号 + 1。并发登记导致卷号冲突时回滚并重新取号，
    超过重试次数仍冲突则抛出 IntegrityError。
    """
    po = db.query(models.ProductionOrder).filter(models.ProductionOrder.id == roll.production_order_id).first()
    if not po:
        raise LookupError(f"production order {roll.production_order_id} not found")
    po_id, po_number = po.id, po.production_order_number

    for attempt in range(1, ROLL_NUMBER_ATTEMPTS + 1):
        seq = next_roll_seq(db, po_id)
        db_roll = models.Roll(
            roll_number=format_roll_number(po_number, seq),
            roll_seq=seq,
            production_order_id=po_id,
            stage=RollStage.film.value,
            weight_kg=str(roll.weight_kg),
            film_machine_name=roll.film_machine_name,
            created_by_name=roll.created_by_name,
        )
        db.add(db_roll)
        try:
            db.commit()
        except IntegrityError:
            db.rollback()
            if attempt == ROLL_NUMBER_ATTEMPTS:
                raise
            logger.warning("卷号 %s 已被占用，重新取号（第 %d 次）", db_roll.roll_number, attempt)
            continue
        db.refresh(db_roll)
        return db_roll


def get_roll(db: Session, roll_id: int):
    return db.query(models.Roll).filter(models.Roll.id == roll_id).first()


def advance_roll(db: Session, roll_id: int, data: schemas.RollAdvance):
    """推进卷材到下一工段

    printing 完成时记录印刷时间；cutting 完成时记录切后重量、废料与完成时间。
    已归档或工段未知的卷材无法推进，抛出 ValueError。
    """
    db_roll = get_roll(db, roll_id)
    if not db_roll:
        raise LookupError(f"roll {roll_id} not found")

    target = next_stage(db_roll.stage)
    if target is None:
        raise ValueError(f"roll {db_roll.roll_number} cannot advance from stage {db_roll.stage!r}")

    now = datetime.utcnow()
    if target == RollStage.printing:
        db_roll.printing_machine_name = data.machine_name
    elif target == RollStage.cutting:
        db_roll.printed_at = now
        db_roll.printed_by_name = data.operator_name
        db_roll.cutting_machine_name = data.machine_name
    elif target == RollStage.done:
        if data.cut_weight_total_kg is None:
            raise ValueError("cut_weight_total_kg is required when cutting completes")
        db_roll.cut_weight_total_kg = str(data.cut_weight_total_kg)
        db_roll.waste_kg = str(data.waste_kg if data.waste_kg is not None else 0)
        db_roll.cut_completed_at = now
        db_roll.cut_by_name = data.operator_name

    previous = db_roll.stage
    db_roll.stage = target.value
    db.commit()
    db.refresh(db_roll)
    logger.info("卷材 %s 工段 %s -> %s", db_roll.roll_number, previous, target.value)
    return db_roll


def list_roll_records(db: Session) -> List[schemas.RollRecord]:
    """联表查询全部卷材，最新登记的在前"""
    rows = (
        db.query(models.Roll, models.ProductionOrder, models.Order, models.Customer)
        .join(models.ProductionOrder, models.Roll.production_order_id == models.ProductionOrder.id)
        .join(models.Order, models.ProductionOrder.order_id == models.Order.id)
        .outerjoin(models.Customer, models.Order.customer_id == models.Customer.id)
        .order_by(models.Roll.created_at.desc(), models.Roll.id.desc())
        .all()
    )
    records = []
    for roll, po, order, customer in rows:
        records.append(schemas.RollRecord(
            roll_id=roll.id,
            roll_number=roll.roll_number,
            roll_seq=roll.roll_seq,
            stage=roll.stage,
            weight_kg=roll.weight_kg,
            cut_weight_total_kg=roll.cut_weight_total_kg,
            waste_kg=roll.waste_kg,
            created_at=roll.created_at,
            printed_at=roll.printed_at,
            cut_completed_at=roll.cut_completed_at,
            production_order_id=po.id,
            production_order_number=po.production_order_number,
            order_id=order.id,
            order_number=order.order_number,
            customer_id=order.customer_id,
            customer_name=customer.name if customer else None,
            customer_name_ar=customer.name_ar if customer else None,
            item_name=po.item_name,
            item_name_ar=po.item_name_ar,
            size_caption=po.size_caption,
            film_machine_name=roll.film_machine_name,
            printing_machine_name=roll.printing_machine_name,
            cutting_machine_name=roll.cutting_machine_name,
            created_by_name=roll.created_by_name,
            printed_by_name=roll.printed_by_name,
            cut_by_name=roll.cut_by_name,
        ))
    return records
