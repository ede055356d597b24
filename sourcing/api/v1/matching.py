"""供应商匹配API路由

看板统计、待分配队列、推荐列表、手动/快速分配以及批量分配
"""

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from ... import crud, schemas
from ...core import assignment
from ...core.dashboard import build_overview, build_queue
from ...core.errors import (
    AssignmentWriteError,
    IneligibleSupplier,
    MatchingError,
    NoSuitableSuppliers,
    QuoteAlreadyAssigned,
    QuoteNotFound,
    SupplierLoadError,
    SupplierNotSelected,
)
from ...core.loaders import cached_unassigned_quotes, cached_verified_suppliers
from ...core.matcher import recommend_suppliers, rank_suppliers
from ...core.planner import plan_assignments
from ...config.settings import settings
from ...database.connection import get_db

router = APIRouter(prefix="/matching")

# 异常 -> HTTP 状态码
ERROR_STATUS = {
    SupplierNotSelected: 400,
    IneligibleSupplier: 400,
    QuoteNotFound: 404,
    QuoteAlreadyAssigned: 409,
    NoSuitableSuppliers: 422,
    SupplierLoadError: 503,
    AssignmentWriteError: 503,
}


def to_http_error(exc: MatchingError) -> HTTPException:
    return HTTPException(status_code=ERROR_STATUS.get(type(exc), 400), detail=exc.message)


@router.get("/overview", response_model=schemas.MatchingOverview)
def matching_overview(db: Session = Depends(get_db)):
    """看板统计：待分配数、高紧急数、可接单供应商数、平均最佳匹配分"""
    quotes = cached_unassigned_quotes(db)
    suppliers = cached_verified_suppliers(db)
    overview = build_overview(quotes.items, suppliers.items)
    overview.error = quotes.error or suppliers.error
    return overview


@router.get("/queue", response_model=schemas.QueueResponse)
def matching_queue(db: Session = Depends(get_db)):
    """待分配报价及各自排名第一的供应商预览"""
    quotes = cached_unassigned_quotes(db)
    suppliers = cached_verified_suppliers(db)
    entries = build_queue(quotes.items, suppliers.items)
    return schemas.QueueResponse(items=entries, total=len(entries), error=quotes.error or suppliers.error)


@router.get("/quotes/{quote_id}/recommendations", response_model=schemas.RecommendationResponse)
def quote_recommendations(
    quote_id: int,
    top_k: int = Query(None, ge=1, le=50, description="返回的推荐数量，默认取配置 MATCH_TOP_K"),
    db: Session = Depends(get_db),
):
    """报价的推荐供应商（按匹配分降序）"""
    quote = crud.get_quote(db, quote_id)
    if not quote:
        raise HTTPException(status_code=404, detail="Quote not found")
    suppliers = cached_verified_suppliers(db)
    matches = recommend_suppliers(quote, suppliers.items, top_k or settings.MATCH_TOP_K)
    return schemas.RecommendationResponse(
        quote_id=quote_id,
        total_candidates=len(rank_suppliers(quote, suppliers.items)),
        matches=matches,
        error=suppliers.error,
    )


@router.post("/quotes/{quote_id}/assign", response_model=schemas.AssignmentResult)
def assign_quote(quote_id: int, request: schemas.AssignRequest, db: Session = Depends(get_db)):
    """手动分配：操作员从推荐列表中选定供应商"""
    try:
        return assignment.assign_supplier(db, quote_id, request.supplier_id)
    except MatchingError as exc:
        raise to_http_error(exc)


@router.post("/quotes/{quote_id}/quick-assign", response_model=schemas.AssignmentResult)
def quick_assign_quote(quote_id: int, db: Session = Depends(get_db)):
    """快速分配：直接分配给排名第一的供应商"""
    try:
        return assignment.quick_assign(db, quote_id)
    except MatchingError as exc:
        raise to_http_error(exc)


@router.get("/plan", response_model=schemas.PlanResponse)
def assignment_plan(db: Session = Depends(get_db)):
    """批量分配计划（只读，计入本批次内的工作量预留）"""
    quotes = cached_unassigned_quotes(db)
    suppliers = cached_verified_suppliers(db)
    plan = plan_assignments(quotes.items, suppliers.items)
    return schemas.PlanResponse(items=plan, total=len(plan), error=quotes.error or suppliers.error)


@router.post("/auto-assign", response_model=schemas.AutoAssignResponse)
def auto_assign_quotes(db: Session = Depends(get_db)):
    """按批量计划分配全部待分配报价"""
    try:
        return assignment.auto_assign(db)
    except MatchingError as exc:
        raise to_http_error(exc)
