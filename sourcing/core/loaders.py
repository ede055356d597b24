"""待分配报价与候选供应商的加载

两个加载器互不依赖，只在匹配时按报价组合。加载失败时返回空结果并附带
错误信息，不重试。
"""

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import crud, models
from ..schemas import SupplierCandidate, UnassignedQuote
from ..utils.helpers import contains_text, utcnow
from ..utils.logger import logger
from .cache import UNASSIGNED_QUOTES, VERIFIED_SUPPLIERS, QueryCache, query_cache
from .urgency import Urgency, classify_urgency

# 供应商资料缺省值
DEFAULT_CAPACITY = 1000
DEFAULT_RATING = 4.0
DEFAULT_RESPONSE_TIME = 24
DEFAULT_PRICE_COMPETITIVENESS = 75


@dataclass
class LoadResult:
    items: List = field(default_factory=list)
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def to_unassigned_quote(quote: models.Quote, buyer: Optional[models.Profile], now: datetime) -> UnassignedQuote:
    urgency = classify_urgency(quote.created_at, quote.quantity, now)
    return UnassignedQuote(
        id=quote.id,
        buyer_id=quote.buyer_id,
        buyer_name=(buyer.full_name if buyer else None) or "Unknown",
        buyer_email=(buyer.email if buyer else None) or "",
        buyer_company=(buyer.company_name if buyer else None) or "Unknown",
        product_type=quote.product_type,
        quantity=quote.quantity,
        target_price=quote.target_price or 0,
        specifications=quote.specifications,
        created_at=quote.created_at,
        urgency=urgency,
        urgency_badge=urgency.badge,
        urgency_label=urgency.label,
    )


def matches_search(quote: UnassignedQuote, search: str) -> bool:
    """按买家姓名、公司或产品品类做不区分大小写的模糊搜索"""
    return (
        contains_text(quote.buyer_name, search)
        or contains_text(quote.buyer_company, search)
        or contains_text(quote.product_type, search)
    )


def load_unassigned_quotes(
    db: Session,
    urgency: Optional[Urgency] = None,
    search: Optional[str] = None,
    now: Optional[datetime] = None,
) -> LoadResult:
    """加载未分配的报价（按创建时间倒序），推导紧急程度后再过滤"""
    if now is None:
        now = utcnow()
    try:
        rows = crud.list_unassigned_quotes(db)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to load unassigned quotes: {}", exc)
        return LoadResult(error="Failed to load unassigned quotes")

    quotes = [to_unassigned_quote(quote, buyer, now) for quote, buyer in rows]
    if urgency is not None:
        quotes = [q for q in quotes if q.urgency == urgency]
    if search:
        quotes = [q for q in quotes if matches_search(q, search)]
    logger.debug("Loaded {} unassigned quotes (urgency={}, search={!r})", len(quotes), urgency, search)
    return LoadResult(items=quotes)


def to_supplier_candidate(profile: models.Profile, total: int, delivered: int) -> SupplierCandidate:
    # 无历史订单时准时率按 100% 计
    on_time = (delivered / total) * 100 if total > 0 else 100.0
    return SupplierCandidate(
        id=profile.id,
        full_name=profile.full_name or "Unknown",
        email=profile.email,
        company_name=profile.company_name or "Unknown",
        specialization=profile.specialization or [],
        location=profile.location or "Unknown",
        capacity=profile.capacity or DEFAULT_CAPACITY,
        rating=profile.rating or DEFAULT_RATING,
        average_response_time=profile.average_response_time or DEFAULT_RESPONSE_TIME,
        price_competitiveness=profile.price_competitiveness or DEFAULT_PRICE_COMPETITIVENESS,
        # 工作量取历史订单总数（含已完成订单）
        current_workload=total,
        total_orders=total,
        on_time_delivery=on_time,
        role=profile.role,
        is_verified=profile.is_verified,
    )


def load_verified_suppliers(db: Session) -> LoadResult:
    """加载已认证供应商，并根据全部历史订单计算工作量与准时交付率"""
    try:
        profiles = crud.list_verified_suppliers(db)
        stats = crud.order_stats_by_supplier(db)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Failed to load verified suppliers: {}", exc)
        return LoadResult(error="Failed to load suppliers")

    suppliers = [to_supplier_candidate(p, *stats.get(p.id, (0, 0))) for p in profiles]
    logger.debug("Loaded {} verified suppliers", len(suppliers))
    return LoadResult(items=suppliers)


def cached_unassigned_quotes(
    db: Session,
    urgency: Optional[Urgency] = None,
    search: Optional[str] = None,
    cache: QueryCache = query_cache,
) -> LoadResult:
    key = (UNASSIGNED_QUOTES, urgency.value if urgency else "all", search or "")
    return cache.get_or_load(key, lambda: load_unassigned_quotes(db, urgency, search))


def cached_verified_suppliers(db: Session, cache: QueryCache = query_cache) -> LoadResult:
    return cache.get_or_load((VERIFIED_SUPPLIERS,), lambda: load_verified_suppliers(db))
