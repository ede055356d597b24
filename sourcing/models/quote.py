"""报价请求模型"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, JSON, Numeric, String

from ..database.connection import Base
from ..utils.helpers import utcnow


class QuoteStatus:
    PENDING = "pending"
    ASSIGNED = "assigned"


class Quote(Base):
    """报价请求表"""
    __tablename__ = "quotes"

    id = Column(Integer, primary_key=True, index=True)
    buyer_id = Column(Integer, ForeignKey("profiles.id"), nullable=True, index=True)
    # 产品品类（自由文本）
    product_type = Column(String(255), nullable=False)
    # 数量（件）
    quantity = Column(Integer, nullable=False)
    # 目标单价，未知时为空
    target_price = Column(Numeric(12, 2), nullable=True)
    specifications = Column(JSON, nullable=True)
    status = Column(String(32), nullable=False, default=QuoteStatus.PENDING)
    # 为空表示尚未分配供应商
    supplier_id = Column(Integer, ForeignKey("profiles.id"), nullable=True, index=True)
    assigned_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=utcnow, index=True)
