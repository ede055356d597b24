"""订单API路由

订单由下游流程创建；这里只提供创建与状态更新，供供应商统计使用
"""

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from ... import crud, schemas
from ...core.cache import VERIFIED_SUPPLIERS, query_cache
from ...database.connection import get_db

router = APIRouter()


@router.post("/orders/", response_model=schemas.OrderRead)
def create_order_endpoint(order: schemas.OrderCreate, db: Session = Depends(get_db)):
    """创建新订单"""
    db_order = crud.create_order(db, order)
    query_cache.invalidate(VERIFIED_SUPPLIERS)
    return db_order


@router.get("/orders/{order_id}", response_model=schemas.OrderRead)
def get_order_endpoint(order_id: int, db: Session = Depends(get_db)):
    db_order = crud.get_order(db, order_id)
    if not db_order:
        raise HTTPException(status_code=404, detail="Order not found")
    return db_order


@router.patch("/orders/{order_id}/status", response_model=schemas.OrderRead)
def update_order_status_endpoint(order_id: int, update: schemas.OrderStatusUpdate, db: Session = Depends(get_db)):
    """更新订单状态（delivered 计入准时交付率）"""
    db_order = crud.update_order_status(db, order_id, update.status)
    if not db_order:
        raise HTTPException(status_code=404, detail="Order not found")
    query_cache.invalidate(VERIFIED_SUPPLIERS)
    return db_order
