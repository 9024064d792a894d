#!/usr/bin/env python3
"""Seed a demo customer, orders, production orders and rolls.

This script is runnable directly (python scripts/seed_demo.py) and also import-safe.
If you see `ModuleNotFoundError: No module named 'rolltrack'`, run from the project root or install the package first.
"""
import sys
from pathlib import Path

# Ensure project root is on sys.path when running the script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import argparse
import logging
from datetime import datetime, timedelta

from rolltrack.db import SessionLocal, init_db
from rolltrack import crud, schemas

logger = logging.getLogger("seed_demo")


def seed_orders(db, count: int, rolls_per_po: int):
    if crud.list_orders(db):
        logger.info("Orders already seeded")
        return
    if not crud.get_customer(db, "CID001"):
        logger.warning("Customer CID001 missing, run without --no-customer first")
        return

    now = datetime.utcnow()
    for n in range(1, count + 1):
        order = schemas.OrderCreate(
            order_number=f"ORD{n:03d}",
            customer_id="CID001",
            created_by="1",
            delivery_days=7 * n,
            created_at=now - timedelta(days=3 * n),
            production_orders=[
                schemas.ProductionOrderCreate(item_name="T-shirt bag", size_caption="30x50", quantity_kg=500 * n),
                schemas.ProductionOrderCreate(item_name="Garbage bag", size_caption="60x80", quantity_kg=250, overrun_percentage=10),
            ],
        )
        db_order = crud.create_order(db, order)
        logger.info("Seeded order %s", db_order.order_number)

        for po in crud.list_production_orders(db, db_order.id):
            for i in range(rolls_per_po):
                roll = crud.create_roll(db, schemas.RollCreate(
                    production_order_id=po.id,
                    weight_kg=45.5 + i,
                    film_machine_name="EXT-01",
                    created_by_name="operator",
                ))
                # 让部分卷材推进到后续工段
                for _ in range(i % 4):
                    crud.advance_roll(db, roll.id, schemas.RollAdvance(
                        machine_name="M-02",
                        operator_name="operator",
                        cut_weight_total_kg=44.0 + i,
                        waste_kg=1.5,
                    ))


def main():
    parser = argparse.ArgumentParser(description='Seed a demo customer with orders, production orders and rolls.')
    parser.add_argument('--orders', type=int, default=3, help='Number of demo orders to create')
    parser.add_argument('--rolls', type=int, default=4, help='Rolls per production order')
    parser.add_argument('--no-customer', action='store_true', help='Skip seeding the demo customer')
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(message)s")

    try:
        init_db()
    except Exception:
        logger.exception("Could not create tables on startup")
        return 1

    with SessionLocal() as db:
        if not args.no_customer:
            if crud.get_customer(db, "CID001"):
                logger.info("Customer already seeded")
            else:
                crud.create_customer(db, schemas.CustomerCreate(id="CID001", name="Gulf Packaging", name_ar="الخليج للتغليف"))
                logger.info("Seeded customer CID001")
        seed_orders(db, args.orders, args.rolls)
    return 0


if __name__ == '__main__':
    sys.exit(main())
