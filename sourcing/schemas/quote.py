"""报价数据结构定义

定义报价相关的Pydantic模型
"""

from decimal import Decimal
from pydantic import BaseModel, Field
from typing import Any, List, Optional
from datetime import datetime

from ..core.urgency import Urgency


class QuoteCreate(BaseModel):
    """买家提交报价请求时的模型"""
    buyer_id: Optional[int] = None
    product_type: str = Field(min_length=1)
    quantity: int = Field(gt=0)  # 数量（件）
    target_price: Optional[Decimal] = Field(default=None, ge=0)  # 目标单价
    specifications: Optional[Any] = None


class QuoteRead(BaseModel):
    """读取报价时的模型"""
    id: int
    buyer_id: Optional[int] = None
    product_type: str
    quantity: int
    target_price: Optional[Decimal] = None
    specifications: Optional[Any] = None
    status: str
    supplier_id: Optional[int] = None
    assigned_at: Optional[datetime] = None
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class UnassignedQuote(BaseModel):
    """待分配报价（买家信息已展开，紧急程度为加载时推导）"""
    id: int
    buyer_id: Optional[int] = None
    buyer_name: str
    buyer_email: str
    buyer_company: str
    product_type: str
    quantity: int
    target_price: Decimal = Decimal("0")
    specifications: Optional[Any] = None
    created_at: datetime
    urgency: Urgency
    urgency_badge: str
    urgency_label: str


class UnassignedQuoteList(BaseModel):
    items: List[UnassignedQuote]
    total: int
    error: Optional[str] = None
