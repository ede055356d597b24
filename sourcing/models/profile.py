"""用户资料模型

买家、供应商和管理员共用一张 profiles 表，通过 role 区分
"""

import enum

from sqlalchemy import Boolean, Column, DateTime, Enum, Float, Integer, JSON, String

from ..database.connection import Base
from ..utils.helpers import utcnow


class RoleEnum(str, enum.Enum):
    buyer = "buyer"
    supplier = "supplier"
    admin = "admin"


class Profile(Base):
    """用户资料表"""
    __tablename__ = "profiles"

    id = Column(Integer, primary_key=True, index=True)
    role = Column(Enum(RoleEnum), nullable=False, default=RoleEnum.buyer, index=True)
    # 仅 role=supplier 且已认证的资料会进入匹配候选池
    is_verified = Column(Boolean, nullable=False, default=False)
    full_name = Column(String(255), nullable=True)
    email = Column(String(255), unique=True, index=True, nullable=True)
    company_name = Column(String(255), nullable=True)
    # 擅长的产品品类，例如 ["T-Shirts", "Hoodies"]
    specialization = Column(JSON, nullable=True)
    location = Column(String(255), nullable=True)
    # 产能（件/周期）
    capacity = Column(Integer, nullable=True)
    # 评分 0-5
    rating = Column(Float, nullable=True)
    # 平均响应时间（小时）
    average_response_time = Column(Float, nullable=True)
    # 价格竞争力评分 0-100
    price_competitiveness = Column(Float, nullable=True)
    created_at = Column(DateTime, default=utcnow)
