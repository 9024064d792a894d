"""数据库操作（CRUD）- 客户相关"""

from sqlalchemy.orm import Session
from .. import models, schemas


def create_customer(db: Session, customer: schemas.CustomerCreate):
    db_customer = models.Customer(id=customer.id, name=customer.name, name_ar=customer.name_ar)
    db.add(db_customer)
    db.commit()
    db.refresh(db_customer)
    return db_customer


def get_customer(db: Session, customer_id: str):
    return db.query(models.Customer).filter(models.Customer.id == customer_id).first()


def list_customers(db: Session):
    return db.query(models.Customer).order_by(models.Customer.id).all()
