"""订单模型定义"""

from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String

from ..database.connection import Base
from ..utils.helpers import utcnow


class OrderStatus:
    PENDING = "pending"
    IN_PRODUCTION = "in_production"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    ALL = (PENDING, IN_PRODUCTION, SHIPPED, DELIVERED, CANCELLED)


class Order(Base):
    """订单模型"""
    __tablename__ = "orders"

    id = Column(Integer, primary_key=True, index=True)
    supplier_id = Column(Integer, ForeignKey("profiles.id"), nullable=True, index=True)
    buyer_id = Column(Integer, ForeignKey("profiles.id"), nullable=True)
    quote_id = Column(Integer, ForeignKey("quotes.id"), nullable=True)
    # 终态为 delivered，用于计算准时交付率
    status = Column(String(32), nullable=False, default=OrderStatus.PENDING)
    # 订单金额（匹配评分不使用）
    total_amount = Column(Numeric(12, 2), nullable=True)
    created_at = Column(DateTime, default=utcnow)
