import pytest
from sqlalchemy.exc import OperationalError

from sourcing import crud
from sourcing.core import assignment
from sourcing.core.cache import QueryCache
from sourcing.core.errors import (
    AssignmentWriteError,
    IneligibleSupplier,
    NoSuitableSuppliers,
    QuoteAlreadyAssigned,
    QuoteNotFound,
    SupplierNotSelected,
)
from sourcing.core.loaders import cached_unassigned_quotes, cached_verified_suppliers
from sourcing.models import QuoteStatus


def test_assign_sets_supplier_status_and_timestamp(db, make_quote, make_supplier):
    quote = make_quote()
    supplier = make_supplier()

    result = assignment.assign_supplier(db, quote.id, supplier.id)
    assert result.supplier_id == supplier.id
    assert result.status == QuoteStatus.ASSIGNED

    db.expire_all()
    stored = crud.get_quote(db, quote.id)
    assert stored.supplier_id == supplier.id
    assert stored.status == QuoteStatus.ASSIGNED
    assert stored.assigned_at is not None


def test_double_assignment_is_rejected_without_overwrite(db, make_quote, make_supplier):
    quote = make_quote()
    first = make_supplier("First")
    second = make_supplier("Second")
    assignment.assign_supplier(db, quote.id, first.id)

    with pytest.raises(QuoteAlreadyAssigned):
        assignment.assign_supplier(db, quote.id, second.id)

    db.expire_all()
    assert crud.get_quote(db, quote.id).supplier_id == first.id


def test_missing_supplier_is_rejected_before_write(db, make_quote, monkeypatch):
    quote = make_quote()

    def fail(*args, **kwargs):
        raise AssertionError("no write expected")

    monkeypatch.setattr(crud, "assign_quote_if_unassigned", fail)
    with pytest.raises(SupplierNotSelected):
        assignment.assign_supplier(db, quote.id, None)


def test_unverified_or_buyer_profile_cannot_be_assigned(db, make_quote, make_supplier, make_buyer):
    quote = make_quote()
    with pytest.raises(IneligibleSupplier):
        assignment.assign_supplier(db, quote.id, make_supplier(verified=False).id)
    with pytest.raises(IneligibleSupplier):
        assignment.assign_supplier(db, quote.id, make_buyer().id)
    assert crud.get_quote(db, quote.id).supplier_id is None


def test_unknown_quote(db, make_supplier):
    with pytest.raises(QuoteNotFound):
        assignment.assign_supplier(db, 999, make_supplier().id)


def test_write_failure_is_reported(db, make_quote, make_supplier, monkeypatch):
    quote = make_quote()
    supplier = make_supplier()

    def broken(*args, **kwargs):
        raise OperationalError("UPDATE quotes", {}, Exception("database is locked"))

    monkeypatch.setattr(crud, "assign_quote_if_unassigned", broken)
    with pytest.raises(AssignmentWriteError) as exc:
        assignment.assign_supplier(db, quote.id, supplier.id)
    assert exc.value.message == "Failed to assign supplier"
    assert crud.get_quote(db, quote.id).supplier_id is None


def test_assignment_invalidates_loader_cache(db, make_quote, make_supplier):
    cache = QueryCache(ttl_seconds=300)
    quote = make_quote()
    supplier = make_supplier()
    assert len(cached_unassigned_quotes(db, cache=cache).items) == 1
    cached_verified_suppliers(db, cache)

    assignment.assign_supplier(db, quote.id, supplier.id, cache=cache)

    assert ("verified-suppliers",) not in cache
    assert cached_unassigned_quotes(db, cache=cache).items == []


def test_quick_assign_picks_highest_score(db, make_quote, make_supplier, make_orders):
    quote = make_quote("Hoodies")
    make_supplier("T-Shirt Mill", specialization=["T-Shirts"])
    fleece = make_supplier("Fleece Mill", specialization=["Hoodies"])
    busy = make_supplier("Busy Fleece", specialization=["Hoodies"], capacity=10)
    make_orders(busy, total=9)

    result = assignment.quick_assign(db, quote.id, cache=QueryCache(ttl_seconds=0))
    assert result.supplier_id == fleece.id
    assert result.match_score == 100


def test_quick_assign_without_suppliers_reports_failure(db, make_quote, make_supplier):
    quote = make_quote()
    make_supplier(verified=False)
    with pytest.raises(NoSuitableSuppliers):
        assignment.quick_assign(db, quote.id, cache=QueryCache(ttl_seconds=0))
    assert crud.get_quote(db, quote.id).supplier_id is None


def test_quick_assign_rejects_assigned_quote(db, make_quote, make_supplier):
    quote = make_quote()
    supplier = make_supplier()
    assignment.assign_supplier(db, quote.id, supplier.id)
    with pytest.raises(QuoteAlreadyAssigned):
        assignment.quick_assign(db, quote.id, cache=QueryCache(ttl_seconds=0))


def test_auto_assign_spreads_batch_across_suppliers(db, make_quote, make_supplier):
    first = make_quote("T-Shirts")
    second = make_quote("T-Shirts")
    top = make_supplier("Top Mill", capacity=2, rating=5.0)
    runner_up = make_supplier("Runner Up", capacity=2, rating=4.5)

    report = assignment.auto_assign(db, cache=QueryCache(ttl_seconds=0))
    assert report.assigned == 2
    assert report.failed == 0

    db.expire_all()
    assigned_to = {crud.get_quote(db, q.id).supplier_id for q in (first, second)}
    assert assigned_to == {top.id, runner_up.id}
