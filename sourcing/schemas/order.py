"""订单数据结构定义

定义订单相关的Pydantic模型
"""

from decimal import Decimal
from pydantic import BaseModel, field_validator
from typing import Optional
from datetime import datetime

from ..models.order import OrderStatus


def _check_status(value: str) -> str:
    if value not in OrderStatus.ALL:
        raise ValueError(f"status must be one of {', '.join(OrderStatus.ALL)}")
    return value


class OrderCreate(BaseModel):
    """创建订单时的模型"""
    supplier_id: Optional[int] = None
    buyer_id: Optional[int] = None
    quote_id: Optional[int] = None
    status: str = OrderStatus.PENDING
    total_amount: Optional[Decimal] = None

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        return _check_status(value)


class OrderStatusUpdate(BaseModel):
    """更新订单状态时的模型"""
    status: str

    @field_validator("status")
    @classmethod
    def validate_status(cls, value: str) -> str:
        return _check_status(value)


class OrderRead(BaseModel):
    """读取订单时的模型"""
    id: int
    supplier_id: Optional[int] = None
    buyer_id: Optional[int] = None
    quote_id: Optional[int] = None
    status: str
    total_amount: Optional[Decimal] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}
