from datetime import timedelta

from sourcing.core.planner import plan_assignments
from sourcing.core.urgency import Urgency
from sourcing.schemas import SupplierCandidate, UnassignedQuote
from sourcing.utils.helpers import utcnow


def supplier(id, rating=5.0, capacity=2, workload=0, specialization=("T-Shirts",)):
    return SupplierCandidate(
        id=id,
        full_name="Owner",
        company_name=f"Mill {id}",
        specialization=list(specialization),
        location="Dhaka",
        capacity=capacity,
        rating=rating,
        average_response_time=24,
        price_competitiveness=75,
        current_workload=workload,
        total_orders=workload,
    )


def pending(id, urgency=Urgency.low, product_type="T-Shirts"):
    return UnassignedQuote(
        id=id,
        buyer_name="Unknown",
        buyer_email="",
        buyer_company="Unknown",
        product_type=product_type,
        quantity=100,
        created_at=utcnow() - timedelta(hours=id),
        urgency=urgency,
        urgency_badge=urgency.badge,
        urgency_label=urgency.label,
    )


def test_reservation_moves_second_quote_to_next_supplier():
    plan = plan_assignments([pending(1), pending(2)], [supplier(10, rating=5.0), supplier(20, rating=4.5)])

    assert [p.supplier_id for p in plan] == [10, 20]
    assert plan[0].match_score == 100
    assert plan[0].reserved_workload == 1
    assert plan[1].match_score == 98


def test_without_reservation_both_quotes_would_rank_same_supplier_first():
    from sourcing.core.matcher import pick_top_supplier

    pool = [supplier(10, rating=5.0), supplier(20, rating=4.5)]
    assert pick_top_supplier(pending(1), pool).supplier.id == 10
    assert pick_top_supplier(pending(2), pool).supplier.id == 10


def test_high_urgency_quotes_are_planned_first():
    quotes = [pending(1, Urgency.low), pending(2, Urgency.medium), pending(3, Urgency.high)]
    plan = plan_assignments(quotes, [supplier(10), supplier(20, rating=4.5)])

    assert [p.quote_id for p in plan] == [3, 2, 1]
    assert [p.urgency for p in plan] == ["high", "medium", "low"]
    assert plan[0].supplier_id == 10


def test_quote_without_candidates_gets_note():
    plan = plan_assignments([pending(1)], [])
    assert plan[0].supplier_id is None
    assert plan[0].note == "No suitable suppliers found"


def test_plan_does_not_mutate_supplier_pool():
    pool = [supplier(10)]
    plan_assignments([pending(1), pending(2), pending(3)], pool)
    assert pool[0].current_workload == 0
