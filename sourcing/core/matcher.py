"""匹配评分与排序

对单个报价，按四项独立加权信号为每个供应商打分（满分 100）：
- 品类匹配 40 分：品类列表中精确包含产品品类得 40 分，否则存在不区分大小写的
  子串关系（任一方向）得 20 分
- 产能余量 25 分：工作量/产能 <50% 得 25 分，<75% 得 15 分，<90% 得 5 分
- 评分 20 分：rating / 5 * 20
- 准时交付 15 分：on_time_delivery / 100 * 15
总分四舍五入取整，不做截断。

评分对每个报价独立计算，不考虑同一批次中其他报价占用的产能：同一批次的两个
报价可能都把同一个低负载供应商排在第一位。需要批量分配时使用 planner 模块。
"""

from typing import List, Optional, Sequence, Tuple

from ..config.settings import settings
from ..schemas import ScoreBreakdown, SupplierCandidate, SupplierMatch
from ..utils.helpers import round_half_up
from .errors import NoSuitableSuppliers

SPECIALIZATION_EXACT_POINTS = 40
SPECIALIZATION_RELATED_POINTS = 20
# (工作量百分比上限, 得分)，按顺序判断
CAPACITY_TIERS = ((50, 25), (75, 15), (90, 5))
RATING_POINTS = 20
MAX_RATING = 5
ON_TIME_POINTS = 15


def specialization_points(product_type: str, specialization: Sequence[str]) -> Tuple[int, Optional[str]]:
    if product_type in specialization:
        return SPECIALIZATION_EXACT_POINTS, f"Specializes in {product_type}"
    product = product_type.lower()
    # 空字符串品类与任何产品都构成子串关系；资料录入时已清理空白品类
    for category in specialization:
        lowered = category.lower()
        if product in lowered or lowered in product:
            return SPECIALIZATION_RELATED_POINTS, f"Related specialization: {category}"
    return 0, None


def capacity_points(workload: int, capacity: int) -> Tuple[int, str]:
    percentage = workload / capacity * 100
    for limit, points in CAPACITY_TIERS:
        if percentage < limit:
            return points, f"Workload at {round_half_up(percentage)}% of capacity"
    return 0, f"Near or over capacity ({round_half_up(percentage)}%)"


def score_breakdown(quote, supplier: SupplierCandidate) -> Tuple[ScoreBreakdown, List[str]]:
    """计算各项得分明细与匹配理由"""
    reasons = []
    spec, spec_reason = specialization_points(quote.product_type, supplier.specialization)
    if spec_reason:
        reasons.append(spec_reason)
    cap, cap_reason = capacity_points(supplier.current_workload, supplier.capacity)
    reasons.append(cap_reason)
    rating = supplier.rating / MAX_RATING * RATING_POINTS
    reasons.append(f"Rated {supplier.rating:.1f}/5")
    on_time = supplier.on_time_delivery / 100 * ON_TIME_POINTS
    reasons.append(f"{round_half_up(supplier.on_time_delivery)}% on-time delivery")
    breakdown = ScoreBreakdown(specialization=spec, capacity=cap, rating=rating, on_time_delivery=on_time)
    return breakdown, reasons


def calculate_match_score(quote, supplier: SupplierCandidate) -> int:
    """计算报价与供应商的匹配分（0-100 的整数）"""
    breakdown, _ = score_breakdown(quote, supplier)
    return round_half_up(breakdown.raw_total)


def build_match(quote, supplier: SupplierCandidate) -> SupplierMatch:
    breakdown, reasons = score_breakdown(quote, supplier)
    return SupplierMatch(
        quote_id=quote.id,
        supplier=supplier,
        match_score=round_half_up(breakdown.raw_total),
        breakdown=breakdown,
        reasons=reasons,
    )


def rank_suppliers(quote, suppliers: Sequence[SupplierCandidate]) -> List[SupplierMatch]:
    """按匹配分降序排列全部合格供应商；同分保持加载顺序（稳定排序）"""
    matches = [build_match(quote, s) for s in suppliers if s.is_eligible]
    return sorted(matches, key=lambda m: m.match_score, reverse=True)


def recommend_suppliers(quote, suppliers: Sequence[SupplierCandidate], top_k: int = None) -> List[SupplierMatch]:
    """返回排名前 top_k 的供应商"""
    if top_k is None:
        top_k = settings.MATCH_TOP_K
    return rank_suppliers(quote, suppliers)[:top_k]


def pick_top_supplier(quote, suppliers: Sequence[SupplierCandidate]) -> SupplierMatch:
    """快速分配使用的排名第一的供应商；没有候选时抛出 NoSuitableSuppliers"""
    ranked = rank_suppliers(quote, suppliers)
    if not ranked:
        raise NoSuitableSuppliers()
    return ranked[0]
