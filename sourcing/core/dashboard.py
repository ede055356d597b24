"""匹配看板统计与待分配队列"""

from typing import List, Sequence

from ..schemas import MatchingOverview, QueueEntry, SupplierCandidate, UnassignedQuote
from ..utils.helpers import round_half_up
from .matcher import rank_suppliers
from .urgency import Urgency

# 工作量低于产能 80% 视为可接单
AVAILABLE_WORKLOAD_RATIO = 0.8


def build_queue(quotes: Sequence[UnassignedQuote], suppliers: Sequence[SupplierCandidate]) -> List[QueueEntry]:
    entries = []
    for quote in quotes:
        ranked = rank_suppliers(quote, suppliers)
        entries.append(QueueEntry(quote=quote, top_match=ranked[0] if ranked else None))
    return entries


def build_overview(quotes: Sequence[UnassignedQuote], suppliers: Sequence[SupplierCandidate]) -> MatchingOverview:
    high = sum(1 for q in quotes if q.urgency == Urgency.high)
    available = sum(1 for s in suppliers if s.workload_ratio < AVAILABLE_WORKLOAD_RATIO)

    average = 0
    if quotes and suppliers:
        top_scores = [e.top_match.match_score if e.top_match else 0 for e in build_queue(quotes, suppliers)]
        average = round_half_up(sum(top_scores) / len(quotes))

    return MatchingOverview(
        unassigned_quotes=len(quotes),
        high_urgency=high,
        available_suppliers=available,
        average_match_score=average,
    )
