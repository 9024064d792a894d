import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ... import crud, schemas
from ...core.completion import aggregate_completion, aggregate_completion_by_order
from ...core.delivery import compute_delivery_info
from ...core.filters import OrderFilter, filter_orders
from ...core.order_status import TransitionOutcome, transition_order_status
from ...core.stats import OrderStats, summarize_orders
from ...database.connection import get_db
from .deps import resolve_id

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/orders", tags=["orders"])


def build_overview(order: schemas.OrderRead, production_orders) -> schemas.OrderOverview:
    return schemas.OrderOverview(
        order=order,
        delivery=compute_delivery_info(order),
        completion=aggregate_completion(order, production_orders),
    )


@router.get("/", response_model=List[schemas.OrderOverview])
def list_orders_endpoint(
    search: Optional[str] = Query(None, description="订单号或客户名"),
    status: Optional[str] = Query("all", description="订单状态，all 表示全部"),
    db: Session = Depends(get_db),
):
    """订单列表：交货期与各工段完成度"""
    orders = [crud.to_order_record(o) for o in crud.list_orders(db)]
    orders = filter_orders(orders, OrderFilter(search=search, status=status))
    production_orders = [schemas.ProductionOrderRead.model_validate(po) for po in crud.list_production_orders(db)]
    completions = aggregate_completion_by_order(orders, production_orders)
    return [
        schemas.OrderOverview(
            order=order,
            delivery=compute_delivery_info(order),
            completion=completions[order.id],
        )
        for order in orders
    ]


@router.get("/stats", response_model=OrderStats)
def order_stats_endpoint(db: Session = Depends(get_db)):
    """订单统计卡片"""
    return summarize_orders(crud.list_orders(db), crud.list_production_orders(db))


@router.post("/", response_model=schemas.OrderOverview)
def create_order_endpoint(order: schemas.OrderCreate, db: Session = Depends(get_db)):
    """创建新订单及其生产单"""
    if not crud.get_customer(db, order.customer_id):
        raise HTTPException(status_code=400, detail=f"Unknown customer {order.customer_id}")
    try:
        db_order = crud.create_order(db, order)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=f"Order number {order.order_number} already exists")
    return build_overview(crud.to_order_record(db_order), crud.list_production_orders(db, db_order.id))


@router.get("/{order_id}", response_model=schemas.OrderOverview)
def get_order_endpoint(order_id: str, db: Session = Depends(get_db)):
    db_order = crud.get_order(db, resolve_id(order_id, "order_id"))
    if not db_order:
        raise HTTPException(status_code=404, detail="Order not found")
    return build_overview(crud.to_order_record(db_order), crud.list_production_orders(db, db_order.id))


@router.patch("/{order_id}/status", response_model=schemas.OrderRead)
def update_order_status_endpoint(
    order_id: str,
    payload: schemas.OrderStatusUpdate,
    db: Session = Depends(get_db),
):
    """手动变更订单状态"""
    oid = resolve_id(order_id, "order_id")
    db_order = crud.get_order(db, oid)
    if not db_order:
        raise HTTPException(status_code=404, detail="Order not found")

    result = transition_order_status(
        crud.to_order_record(db_order),
        payload.status,
        persist=lambda updated: crud.update_order_status(db, oid, updated.status),
    )
    if result.outcome in (TransitionOutcome.invalid_status, TransitionOutcome.invalid_order):
        raise HTTPException(status_code=400, detail=result.error)
    if result.outcome == TransitionOutcome.persistence_failed:
        raise HTTPException(status_code=503, detail="Failed to persist order status")
    return result.order


@router.delete("/{order_id}")
def delete_order_endpoint(order_id: str, db: Session = Depends(get_db)):
    """删除指定ID的订单"""
    success = crud.delete_order(db, resolve_id(order_id, "order_id"))
    if not success:
        raise HTTPException(status_code=404, detail="Order not found")
    return {"message": "Order deleted successfully"}
