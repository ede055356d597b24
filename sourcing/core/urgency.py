"""报价紧急程度

根据报价的挂起天数和数量推导紧急程度，每次加载时重新计算，不落库。
判定规则（逐级判断，任一条件满足即升级）：
- high:   挂起超过 3 天，或数量超过 1000 件
- medium: 挂起超过 1 天，或数量超过 500 件
- low:    其他情况
"""

import enum
from datetime import datetime
from typing import Optional

from ..utils.helpers import days_between, utcnow

HIGH_AGE_DAYS = 3
HIGH_QUANTITY = 1000
MEDIUM_AGE_DAYS = 1
MEDIUM_QUANTITY = 500


class Urgency(str, enum.Enum):
    high = "high"
    medium = "medium"
    low = "low"

    @property
    def badge(self) -> str:
        """界面徽章样式"""
        return _BADGES[self]

    @property
    def label(self) -> str:
        return _LABELS[self]

    @property
    def priority(self) -> int:
        """数值越小越优先处理"""
        return _PRIORITIES[self]


_BADGES = {Urgency.high: "destructive", Urgency.medium: "default", Urgency.low: "secondary"}
_LABELS = {Urgency.high: "High", Urgency.medium: "Medium", Urgency.low: "Low"}
_PRIORITIES = {Urgency.high: 0, Urgency.medium: 1, Urgency.low: 2}


def classify_urgency(created_at: datetime, quantity: int, now: Optional[datetime] = None) -> Urgency:
    """推导单个报价的紧急程度"""
    if now is None:
        now = utcnow()
    age_days = days_between(created_at, now)
    if age_days > HIGH_AGE_DAYS or quantity > HIGH_QUANTITY:
        return Urgency.high
    if age_days > MEDIUM_AGE_DAYS or quantity > MEDIUM_QUANTITY:
        return Urgency.medium
    return Urgency.low
