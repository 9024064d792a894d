from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from ... import crud, schemas
from ...database.connection import get_db
from .deps import resolve_id

router = APIRouter(prefix="/production-orders", tags=["production-orders"])


@router.get("/", response_model=List[schemas.ProductionOrderRead])
def list_production_orders_endpoint(order_id: Optional[int] = None, db: Session = Depends(get_db)):
    return crud.list_production_orders(db, order_id)


@router.patch("/{production_order_id}/progress", response_model=schemas.ProductionOrderRead)
def update_progress_endpoint(
    production_order_id: str,
    progress: schemas.ProductionOrderProgressUpdate,
    db: Session = Depends(get_db),
):
    """更新生产单各工段完成百分比"""
    db_po = crud.update_progress(db, resolve_id(production_order_id, "production_order_id"), progress)
    if not db_po:
        raise HTTPException(status_code=404, detail="Production order not found")
    return db_po
