from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session
from ... import crud, schemas
from ...database.connection import get_db

router = APIRouter(prefix="/customers", tags=["customers"])


@router.post("/", response_model=schemas.CustomerRead)
def create_customer_endpoint(customer: schemas.CustomerCreate, db: Session = Depends(get_db)):
    try:
        return crud.create_customer(db, customer)
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail=f"Customer {customer.id} already exists")


@router.get("/", response_model=List[schemas.CustomerRead])
def list_customers_endpoint(db: Session = Depends(get_db)):
    return crud.list_customers(db)
