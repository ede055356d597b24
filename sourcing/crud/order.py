"""数据库操作（CRUD）- 订单相关

order_stats_by_supplier 对全部历史订单按供应商分组统计，供匹配加载使用
"""

from sqlalchemy import case, func
from sqlalchemy.orm import Session
from .. import models, schemas


def create_order(db: Session, order: schemas.OrderCreate):
    """创建订单"""
    db_order = models.Order(**order.model_dump())
    db.add(db_order)
    db.commit()
    db.refresh(db_order)
    return db_order


def get_order(db: Session, order_id: int):
    return db.query(models.Order).filter(models.Order.id == order_id).first()


def update_order_status(db: Session, order_id: int, status: str):
    """更新订单状态"""
    db_order = get_order(db, order_id)
    if not db_order:
        return None
    db_order.status = status
    db.commit()
    db.refresh(db_order)
    return db_order


def order_stats_by_supplier(db: Session):
    """按供应商统计订单总数与已交付数

    返回 {supplier_id: (total, delivered)}，不按时间范围过滤
    """
    delivered = func.sum(case((models.Order.status == models.OrderStatus.DELIVERED, 1), else_=0))
    rows = (
        db.query(models.Order.supplier_id, func.count(models.Order.id), delivered)
        .filter(models.Order.supplier_id.isnot(None))
        .group_by(models.Order.supplier_id)
        .all()
    )
    return {supplier_id: (int(total), int(done or 0)) for supplier_id, total, done in rows}
