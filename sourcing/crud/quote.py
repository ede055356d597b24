"""数据库操作（CRUD）- 报价相关

- list_unassigned_quotes 返回未分配的报价及其买家资料（按创建时间倒序）
- assign_quote_if_unassigned 以条件更新的方式写入分配结果，防止重复分配
"""

from datetime import datetime

from sqlalchemy import update
from sqlalchemy.orm import Session, aliased
from .. import models, schemas


def create_quote(db: Session, quote: schemas.QuoteCreate):
    """创建报价请求"""
    db_quote = models.Quote(
        buyer_id=quote.buyer_id,
        product_type=quote.product_type,
        quantity=quote.quantity,
        target_price=quote.target_price,
        specifications=quote.specifications,
    )
    db.add(db_quote)
    db.commit()
    db.refresh(db_quote)
    return db_quote


def get_quote(db: Session, quote_id: int):
    return db.query(models.Quote).filter(models.Quote.id == quote_id).first()


def list_unassigned_quotes(db: Session):
    """获取未分配供应商的报价，返回 (Quote, 买家Profile或None) 列表"""
    buyer = aliased(models.Profile)
    return (
        db.query(models.Quote, buyer)
        .outerjoin(buyer, models.Quote.buyer_id == buyer.id)
        .filter(models.Quote.supplier_id.is_(None))
        .order_by(models.Quote.created_at.desc(), models.Quote.id.desc())
        .all()
    )


def assign_quote_if_unassigned(db: Session, quote_id: int, supplier_id: int, assigned_at: datetime) -> int:
    """仅当报价仍未分配时写入供应商、状态和分配时间，返回受影响的行数"""
    stmt = (
        update(models.Quote)
        .where(models.Quote.id == quote_id)
        .where(models.Quote.supplier_id.is_(None))
        .values(
            supplier_id=supplier_id,
            status=models.QuoteStatus.ASSIGNED,
            assigned_at=assigned_at,
        )
        .execution_options(synchronize_session=False)
    )
    result = db.execute(stmt)
    db.commit()
    return result.rowcount
