"""数据库模型模块

定义所有 SQLAlchemy ORM 模型
"""

from ..database.connection import Base
from .profile import Profile, RoleEnum
from .quote import Quote, QuoteStatus
from .order import Order, OrderStatus

__all__ = ["Base", "Profile", "RoleEnum", "Quote", "QuoteStatus", "Order", "OrderStatus"]
