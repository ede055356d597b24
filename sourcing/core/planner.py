"""批量分配计划

逐个报价做匹配时，每选定一个供应商就在本批次内为其预留一个单位的工作量，
再为下一个报价评分，避免同一批次把多个报价都分给同一个低负载供应商。
报价按紧急程度（high 优先）处理，同级保持加载顺序。
"""

from typing import Dict, List, Sequence

from ..schemas import PlannedAssignment, SupplierCandidate, UnassignedQuote
from .errors import NoSuitableSuppliers
from .matcher import rank_suppliers


def _with_reservations(suppliers: Sequence[SupplierCandidate], reserved: Dict[int, int]) -> List[SupplierCandidate]:
    pool = []
    for supplier in suppliers:
        extra = reserved.get(supplier.id, 0)
        if extra:
            supplier = supplier.model_copy(update={"current_workload": supplier.current_workload + extra})
        pool.append(supplier)
    return pool


def plan_assignments(quotes: Sequence[UnassignedQuote], suppliers: Sequence[SupplierCandidate]) -> List[PlannedAssignment]:
    """为一批报价生成分配计划（只计算，不写库）"""
    reserved: Dict[int, int] = {}
    plan = []
    for quote in sorted(quotes, key=lambda q: q.urgency.priority):
        ranked = rank_suppliers(quote, _with_reservations(suppliers, reserved))
        if not ranked:
            plan.append(PlannedAssignment(
                quote_id=quote.id,
                urgency=quote.urgency.value,
                note=NoSuitableSuppliers.message,
            ))
            continue

        top = ranked[0]
        reserved[top.supplier.id] = reserved.get(top.supplier.id, 0) + 1
        plan.append(PlannedAssignment(
            quote_id=quote.id,
            urgency=quote.urgency.value,
            supplier_id=top.supplier.id,
            company_name=top.supplier.company_name,
            match_score=top.match_score,
            reserved_workload=top.supplier.current_workload + 1,
        ))
    return plan
