import os
import sys
from datetime import timedelta
from pathlib import Path
import pytest

# Ensure project root is on sys.path so tests can import 'sourcing' package
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

# Point the app at a throwaway sqlite file before any settings are loaded
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("LOG_LEVEL", "WARNING")

from sourcing.db import Base, engine, SessionLocal
from sourcing import crud, models, schemas
from sourcing.core.cache import query_cache
from sourcing.utils.helpers import utcnow


@pytest.fixture(autouse=True)
def reset_db():
    # Drop all and re-create so the test DB matches the current models exactly
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    query_cache.clear()
    yield
    query_cache.clear()
    Base.metadata.drop_all(bind=engine)


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def make_supplier(db):
    def _make(company_name="Supplier", verified=True, **fields):
        fields.setdefault("specialization", ["T-Shirts"])
        fields.setdefault("capacity", 100)
        fields.setdefault("rating", 5.0)
        return crud.create_profile(db, schemas.ProfileCreate(
            role=models.RoleEnum.supplier, is_verified=verified, company_name=company_name, **fields,
        ))
    return _make


@pytest.fixture
def make_buyer(db):
    def _make(full_name="Anna Berg", company_name="Nordic Wear", email=None):
        return crud.create_profile(db, schemas.ProfileCreate(
            role=models.RoleEnum.buyer, full_name=full_name, company_name=company_name, email=email,
        ))
    return _make


@pytest.fixture
def make_quote(db):
    def _make(product_type="T-Shirts", quantity=300, days_old=0, buyer=None):
        quote = crud.create_quote(db, schemas.QuoteCreate(
            buyer_id=buyer.id if buyer else None, product_type=product_type, quantity=quantity,
        ))
        if days_old:
            quote.created_at = utcnow() - timedelta(days=days_old, hours=1)
            db.commit()
            db.refresh(quote)
        return quote
    return _make


@pytest.fixture
def make_orders(db):
    def _make(supplier, total, delivered=0):
        for idx in range(total):
            status = models.OrderStatus.DELIVERED if idx < delivered else models.OrderStatus.PENDING
            crud.create_order(db, schemas.OrderCreate(supplier_id=supplier.id, status=status))
    return _make
