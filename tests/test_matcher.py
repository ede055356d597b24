import pytest

from sourcing.core.errors import NoSuitableSuppliers
from sourcing.core.matcher import (
    calculate_match_score,
    capacity_points,
    pick_top_supplier,
    rank_suppliers,
    recommend_suppliers,
    score_breakdown,
    specialization_points,
)
from sourcing.models import RoleEnum
from sourcing.schemas import ProfileCreate, SupplierCandidate


def candidate(id=1, **overrides):
    data = dict(
        id=id,
        full_name="Rahim Uddin",
        company_name=f"Supplier {id}",
        specialization=["T-Shirts"],
        location="Gazipur",
        capacity=100,
        rating=5.0,
        average_response_time=24,
        price_competitiveness=75,
        current_workload=10,
        total_orders=10,
        on_time_delivery=100.0,
    )
    data.update(overrides)
    return SupplierCandidate(**data)


def quote(product_type="T-Shirts", id=1):
    return type('Q', (object,), {'id': id, 'product_type': product_type})


def test_perfect_match_scores_100():
    assert calculate_match_score(quote("T-Shirts"), candidate()) == 100


def test_unrelated_product_loses_specialization_points():
    assert calculate_match_score(quote("Hoodies"), candidate()) == 60


def test_exact_match_is_case_sensitive_substring_match_is_not():
    assert specialization_points("T-Shirts", ["T-Shirts"])[0] == 40
    assert specialization_points("t-shirts", ["T-Shirts"])[0] == 20
    # substring in either direction
    assert specialization_points("Organic T-Shirts", ["t-shirts"])[0] == 20
    assert specialization_points("Shirts", ["Polo Shirts"])[0] == 20
    assert specialization_points("Hoodies", ["T-Shirts", "Denim"])[0] == 0


def test_empty_specialization_entry_is_a_substring_of_any_product():
    assert specialization_points("Hoodies", [""])[0] == 20
    assert specialization_points("Hoodies", ["  "])[0] == 0


def test_profile_intake_drops_blank_specialization_entries():
    profile = ProfileCreate(role=RoleEnum.supplier, specialization=[" Hoodies ", "", "   "])
    assert profile.specialization == ["Hoodies"]
    assert ProfileCreate(role=RoleEnum.supplier).specialization is None


def test_capacity_tiers():
    assert capacity_points(49, 100)[0] == 25
    assert capacity_points(50, 100)[0] == 15
    assert capacity_points(74, 100)[0] == 15
    assert capacity_points(75, 100)[0] == 5
    assert capacity_points(89, 100)[0] == 5
    assert capacity_points(90, 100)[0] == 0
    assert capacity_points(250, 100)[0] == 0


def test_capacity_reason_rounds_half_up():
    assert capacity_points(5, 8)[1] == "Workload at 63% of capacity"
    assert capacity_points(75, 80)[1] == "Near or over capacity (94%)"
    _, reasons = score_breakdown(quote(), candidate(on_time_delivery=62.5))
    assert "63% on-time delivery" in reasons


def test_score_is_rounded_half_up():
    # 40 + 25 + 18.5 + 0 = 83.5 -> 84
    supplier = candidate(rating=4.625, on_time_delivery=0.0)
    breakdown, _ = score_breakdown(quote(), supplier)
    assert breakdown.raw_total == pytest.approx(83.5)
    assert calculate_match_score(quote(), supplier) == 84


def test_breakdown_reports_reasons():
    breakdown, reasons = score_breakdown(quote("Organic T-Shirts"), candidate(current_workload=60))
    assert breakdown.specialization == 20
    assert breakdown.capacity == 15
    assert any("Related specialization" in r for r in reasons)
    assert any("60%" in r for r in reasons)


def test_score_stays_within_bounds():
    for product in ["T-Shirts", "shirts", "Hoodies"]:
        for workload in [0, 60, 80, 95, 500]:
            for rating in [0.0, 2.5, 5.0]:
                for on_time in [0.0, 50.0, 100.0]:
                    supplier = candidate(current_workload=workload, rating=rating, on_time_delivery=on_time)
                    assert 0 <= calculate_match_score(quote(product), supplier) <= 100


def test_ties_keep_load_order():
    # 40 + 25 + 17 + 0 = 82 for both tied suppliers
    first = candidate(id=1, rating=4.25, on_time_delivery=0.0)
    second = candidate(id=2, rating=4.25, on_time_delivery=0.0)
    best = candidate(id=3)
    ranked = rank_suppliers(quote(), [first, second, best])
    assert [m.supplier.id for m in ranked] == [3, 1, 2]
    assert ranked[1].match_score == ranked[2].match_score == 82

    ranked_again = rank_suppliers(quote(), [first, second, best])
    assert [m.supplier.id for m in ranked_again] == [3, 1, 2]


def test_ineligible_suppliers_never_ranked():
    unverified = candidate(id=1, is_verified=False)
    buyer = candidate(id=2, role=RoleEnum.buyer)
    ok = candidate(id=3, rating=1.0)
    ranked = rank_suppliers(quote(), [unverified, buyer, ok])
    assert [m.supplier.id for m in ranked] == [3]


def test_recommend_returns_top_five():
    suppliers = [candidate(id=i, rating=i / 2) for i in range(1, 9)]
    matches = recommend_suppliers(quote(), suppliers)
    assert len(matches) == 5
    assert [m.supplier.id for m in matches] == [8, 7, 6, 5, 4]
    assert len(recommend_suppliers(quote(), suppliers, top_k=2)) == 2


def test_empty_pool():
    assert rank_suppliers(quote(), []) == []
    with pytest.raises(NoSuitableSuppliers) as exc:
        pick_top_supplier(quote(), [])
    assert exc.value.message == "No suitable suppliers found"


def test_pick_top_supplier_returns_rank_one():
    top = pick_top_supplier(quote("Hoodies"), [candidate(id=1, rating=3.0), candidate(id=2, specialization=["Hoodies"])])
    assert top.supplier.id == 2
