from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ... import crud, schemas
from ...core.filters import RollFilter, filter_rolls
from ...core.stats import RollStats, summarize_rolls
from ...database.connection import get_db
from .deps import resolve_id

router = APIRouter(prefix="/rolls", tags=["rolls"])


def roll_filter_params(
    q: Optional[str] = Query(None, description="卷号/生产单号/订单号/客户/品名"),
    stage: Optional[str] = Query("all"),
    customer_id: Optional[str] = Query("all"),
    production_order_id: Optional[str] = Query("all"),
    start_date: Optional[date] = Query(None, description="创建日期下限（含当天）"),
    end_date: Optional[date] = Query(None, description="创建日期上限（含当天）"),
) -> RollFilter:
    return RollFilter(
        search=q,
        stage=stage,
        customer_id=customer_id,
        production_order_id=production_order_id,
        start_date=start_date,
        end_date=end_date,
    )


@router.get("/search", response_model=schemas.RollSearchResponse)
def search_rolls_endpoint(criteria: RollFilter = Depends(roll_filter_params), db: Session = Depends(get_db)):
    """按条件筛选卷材，并返回筛选结果的统计"""
    rolls = filter_rolls(crud.list_roll_records(db), criteria)
    return schemas.RollSearchResponse(rolls=rolls, stats=summarize_rolls(rolls))


@router.get("/stats", response_model=RollStats)
def roll_stats_endpoint(criteria: RollFilter = Depends(roll_filter_params), db: Session = Depends(get_db)):
    return summarize_rolls(filter_rolls(crud.list_roll_records(db), criteria))


@router.post("/", response_model=schemas.RollRead)
def create_roll_endpoint(roll: schemas.RollCreate, db: Session = Depends(get_db)):
    try:
        return crud.create_roll(db, roll)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except IntegrityError:
        raise HTTPException(status_code=409, detail="Roll number already taken, please retry")


@router.post("/{roll_id}/advance", response_model=schemas.RollRead)
def advance_roll_endpoint(roll_id: str, data: schemas.RollAdvance, db: Session = Depends(get_db)):
    """推进卷材到下一工段"""
    try:
        return crud.advance_roll(db, resolve_id(roll_id, "roll_id"), data)
    except LookupError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
