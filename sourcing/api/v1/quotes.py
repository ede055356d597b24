"""报价API路由

定义报价提交与待分配报价查询的API端点
"""

from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from ... import crud, schemas
from ...core.cache import UNASSIGNED_QUOTES, query_cache
from ...core.loaders import cached_unassigned_quotes
from ...core.urgency import Urgency
from ...database.connection import get_db
from ...utils.logger import logger

router = APIRouter()


@router.post("/quotes/", response_model=schemas.QuoteRead)
def create_quote(quote: schemas.QuoteCreate, db: Session = Depends(get_db)):
    """买家提交报价请求"""
    if quote.buyer_id is not None and not crud.get_profile(db, quote.buyer_id):
        raise HTTPException(status_code=404, detail="Buyer not found")
    db_quote = crud.create_quote(db, quote)
    query_cache.invalidate(UNASSIGNED_QUOTES)
    logger.info("Quote {} created: {} x {}", db_quote.id, db_quote.quantity, db_quote.product_type)
    return db_quote


@router.get("/quotes/unassigned", response_model=schemas.UnassignedQuoteList)
def list_unassigned_quotes(
    urgency: Optional[Urgency] = Query(None, description="紧急程度: high, medium, low；不传表示全部"),
    search: Optional[str] = Query(None, description="按买家姓名、公司或产品品类搜索"),
    db: Session = Depends(get_db),
):
    """待分配报价，按创建时间倒序"""
    result = cached_unassigned_quotes(db, urgency, search)
    return schemas.UnassignedQuoteList(items=result.items, total=len(result.items), error=result.error)


@router.get("/quotes/{quote_id}", response_model=schemas.QuoteRead)
def read_quote(quote_id: int, db: Session = Depends(get_db)):
    quote = crud.get_quote(db, quote_id)
    if not quote:
        raise HTTPException(status_code=404, detail="Quote not found")
    return quote
