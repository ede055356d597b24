"""用户资料数据结构定义

定义资料相关的Pydantic模型，以及供应商候选（带统计字段）的结构
"""

from pydantic import BaseModel, EmailStr, Field, field_validator
from typing import List, Optional
from datetime import datetime

from ..models.profile import RoleEnum


class ProfileBase(BaseModel):
    """资料基础模型"""
    role: RoleEnum = RoleEnum.buyer
    full_name: Optional[str] = None
    email: Optional[EmailStr] = None
    company_name: Optional[str] = None
    specialization: Optional[List[str]] = None
    location: Optional[str] = None
    capacity: Optional[int] = Field(default=None, gt=0)
    rating: Optional[float] = Field(default=None, ge=0, le=5)
    average_response_time: Optional[float] = Field(default=None, ge=0)
    price_competitiveness: Optional[float] = Field(default=None, ge=0, le=100)

    @field_validator("specialization")
    @classmethod
    def clean_specialization(cls, value):
        """去掉品类首尾空白并丢弃空白品类"""
        if value is None:
            return value
        return [item.strip() for item in value if item.strip()]


class ProfileCreate(ProfileBase):
    """创建资料时的模型"""
    is_verified: bool = False


class ProfileRead(ProfileBase):
    """读取资料时的模型"""
    id: int
    is_verified: bool
    created_at: Optional[datetime] = None

    model_config = {"from_attributes": True}


class SupplierCandidate(BaseModel):
    """参与匹配的供应商（加载时由历史订单计算统计字段）"""
    id: int
    full_name: str
    email: Optional[str] = None
    company_name: str
    specialization: List[str] = []
    location: str
    capacity: int
    rating: float
    average_response_time: float
    price_competitiveness: float
    # 以下为派生字段
    current_workload: int = 0
    total_orders: int = 0
    on_time_delivery: float = 100.0
    role: RoleEnum = RoleEnum.supplier
    is_verified: bool = True

    @property
    def is_eligible(self) -> bool:
        return self.role == RoleEnum.supplier and self.is_verified

    @property
    def workload_ratio(self) -> float:
        return self.current_workload / self.capacity


class SupplierList(BaseModel):
    items: List[SupplierCandidate]
    total: int
    error: Optional[str] = None
