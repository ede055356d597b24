#!/usr/bin/env python3
"""Seed demo buyers, suppliers, quotes and orders.

This script is runnable directly (python scripts/seed_marketplace.py) and also import-safe.
If you see `ModuleNotFoundError: No module named 'sourcing'`, run from the project root or set PYTHONPATH=. before running.
"""
import sys
from datetime import timedelta
from pathlib import Path

# Ensure project root is on sys.path when running the script directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy.exc import SQLAlchemyError

from sourcing.db import SessionLocal, Base, engine
from sourcing import crud, models, schemas
from sourcing.utils.helpers import utcnow


import argparse


DEMO_SUPPLIERS = [
    {"company_name": "Dhaka Knit Works", "full_name": "Rahim Uddin", "email": "rahim@dhakaknit.com",
     "specialization": ["T-Shirts", "Polo Shirts"], "location": "Gazipur", "capacity": 50, "rating": 4.6},
    {"company_name": "Chittagong Denim Ltd", "full_name": "Nasrin Akter", "email": "nasrin@ctgdenim.com",
     "specialization": ["Denim Jeans", "Jackets"], "location": "Chattogram", "capacity": 30, "rating": 4.2},
    {"company_name": "Narayanganj Fleece", "full_name": "Kamal Hossain", "email": "kamal@ngfleece.com",
     "specialization": ["Hoodies", "Sweatshirts"], "location": "Narayanganj", "capacity": 40, "rating": 4.8},
]

DEMO_BUYERS = [
    {"full_name": "Anna Berg", "email": "anna@nordicwear.com", "company_name": "Nordic Wear"},
    {"full_name": "Tom Reyes", "email": "tom@urbanthreads.com", "company_name": "Urban Threads"},
]

# (product_type, quantity, days_old)
DEMO_QUOTES = [
    ("T-Shirts", 300, 0),
    ("Hoodies", 1200, 1),
    ("Denim Jeans", 600, 2),
    ("Organic T-Shirt", 200, 5),
]


def main():
    parser = argparse.ArgumentParser(description='Seed demo profiles, quotes and order history for the matching dashboard.')
    parser.add_argument('--no-quotes', action='store_true', help='Skip seeding quotes')
    parser.add_argument('--no-orders', action='store_true', help='Skip seeding historical orders')
    parser.add_argument('--unverified', action='store_true', help='Leave seeded suppliers unverified')
    args = parser.parse_args()

    try:
        Base.metadata.create_all(bind=engine)
    except SQLAlchemyError as exc:
        print("Warning: could not create tables on startup:", exc)

    try:
        with SessionLocal() as db:
            suppliers = []
            for data in DEMO_SUPPLIERS:
                existing = crud.get_profile_by_email(db, data["email"])
                if existing:
                    print(f"Supplier {data['company_name']} already exists")
                    suppliers.append(existing)
                    continue
                print(f"Creating supplier {data['company_name']}")
                suppliers.append(crud.create_profile(db, schemas.ProfileCreate(
                    role=models.RoleEnum.supplier, is_verified=not args.unverified, **data,
                )))

            buyers = []
            for data in DEMO_BUYERS:
                existing = crud.get_profile_by_email(db, data["email"])
                buyers.append(existing or crud.create_profile(db, schemas.ProfileCreate(role=models.RoleEnum.buyer, **data)))

            if not args.no_orders:
                print("Seeding order history")
                # first supplier: 10 orders, 8 delivered; second: 25 orders, 20 delivered
                for supplier, total, delivered in ((suppliers[0], 10, 8), (suppliers[1], 25, 20)):
                    for idx in range(total):
                        status = models.OrderStatus.DELIVERED if idx < delivered else models.OrderStatus.IN_PRODUCTION
                        crud.create_order(db, schemas.OrderCreate(supplier_id=supplier.id, status=status))
                print("Done seeding orders")

            if not args.no_quotes:
                print("Seeding unassigned quotes")
                now = utcnow()
                for idx, (product_type, quantity, days_old) in enumerate(DEMO_QUOTES):
                    quote = crud.create_quote(db, schemas.QuoteCreate(
                        buyer_id=buyers[idx % len(buyers)].id, product_type=product_type, quantity=quantity,
                    ))
                    quote.created_at = now - timedelta(days=days_old)
                db.commit()
                print("Done seeding quotes")

    except SQLAlchemyError as exc:
        print('Error while seeding data:', exc)


if __name__ == '__main__':
    main()
