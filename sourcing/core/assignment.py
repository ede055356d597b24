"""分配写入

把报价分配给供应商：一次条件更新写入 supplier_id、status 和 assigned_at，
仅当报价仍未分配时生效。写入成功后使两个加载器的缓存失效。
失败不自动重试，报价留在待分配队列中由操作员重新处理。
"""

from typing import Optional

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from .. import crud, models
from ..schemas import AssignmentResult, AutoAssignOutcome, AutoAssignResponse
from ..utils.helpers import utcnow
from ..utils.logger import logger
from .cache import UNASSIGNED_QUOTES, VERIFIED_SUPPLIERS, QueryCache, query_cache
from .errors import (
    AssignmentWriteError,
    IneligibleSupplier,
    MatchingError,
    QuoteAlreadyAssigned,
    QuoteNotFound,
    SupplierLoadError,
    SupplierNotSelected,
)
from .loaders import cached_unassigned_quotes, cached_verified_suppliers
from .matcher import pick_top_supplier
from .planner import plan_assignments


def _is_eligible(profile) -> bool:
    return profile is not None and profile.role == models.RoleEnum.supplier and profile.is_verified


def assign_supplier(
    db: Session,
    quote_id: int,
    supplier_id: Optional[int],
    cache: QueryCache = query_cache,
    match_score: Optional[int] = None,
) -> AssignmentResult:
    """分配报价；已分配的报价不会被覆盖，而是抛出 QuoteAlreadyAssigned"""
    if not supplier_id:
        raise SupplierNotSelected()

    assigned_at = utcnow()
    try:
        if not _is_eligible(crud.get_profile(db, supplier_id)):
            raise IneligibleSupplier()
        updated = crud.assign_quote_if_unassigned(db, quote_id, supplier_id, assigned_at)
        if not updated:
            quote = crud.get_quote(db, quote_id)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.error("Assignment of quote {} to supplier {} failed: {}", quote_id, supplier_id, exc)
        raise AssignmentWriteError() from exc

    if not updated:
        if quote is None:
            raise QuoteNotFound()
        logger.warning(
            "Quote {} already assigned to supplier {}; rejected assignment to {}",
            quote_id, quote.supplier_id, supplier_id,
        )
        raise QuoteAlreadyAssigned()

    cache.invalidate(UNASSIGNED_QUOTES)
    cache.invalidate(VERIFIED_SUPPLIERS)
    logger.info("Quote {} assigned to supplier {} (score={})", quote_id, supplier_id, match_score)
    return AssignmentResult(
        quote_id=quote_id,
        supplier_id=supplier_id,
        status=models.QuoteStatus.ASSIGNED,
        assigned_at=assigned_at,
        match_score=match_score,
    )


def quick_assign(db: Session, quote_id: int, cache: QueryCache = query_cache) -> AssignmentResult:
    """把报价分配给当前排名第一的供应商"""
    quote = crud.get_quote(db, quote_id)
    if quote is None:
        raise QuoteNotFound()
    if quote.supplier_id is not None:
        raise QuoteAlreadyAssigned()

    suppliers = cached_verified_suppliers(db, cache)
    if not suppliers.ok:
        raise SupplierLoadError()
    top = pick_top_supplier(quote, suppliers.items)
    return assign_supplier(db, quote_id, top.supplier.id, cache=cache, match_score=top.match_score)


def auto_assign(db: Session, cache: QueryCache = query_cache) -> AutoAssignResponse:
    """按批量计划依次分配全部待分配报价，逐个报告结果"""
    quotes = cached_unassigned_quotes(db, cache=cache)
    suppliers = cached_verified_suppliers(db, cache)
    if not quotes.ok or not suppliers.ok:
        raise SupplierLoadError(quotes.error or suppliers.error)

    outcomes = []
    for item in plan_assignments(quotes.items, suppliers.items):
        if item.supplier_id is None:
            outcomes.append(AutoAssignOutcome(quote_id=item.quote_id, assigned=False, detail=item.note))
            continue
        try:
            assign_supplier(db, item.quote_id, item.supplier_id, cache=cache, match_score=item.match_score)
        except MatchingError as exc:
            outcomes.append(AutoAssignOutcome(
                quote_id=item.quote_id, supplier_id=item.supplier_id, assigned=False, detail=exc.message,
            ))
        else:
            outcomes.append(AutoAssignOutcome(
                quote_id=item.quote_id, supplier_id=item.supplier_id, assigned=True,
                detail="Supplier assigned successfully!",
            ))

    assigned = sum(1 for o in outcomes if o.assigned)
    logger.info("Auto-assign finished: {} assigned, {} failed", assigned, len(outcomes) - assigned)
    return AutoAssignResponse(assigned=assigned, failed=len(outcomes) - assigned, outcomes=outcomes)
