"""工具函数模块

包含一些常用的工具函数
"""

import math
from datetime import datetime, timezone


def utcnow() -> datetime:
    """返回不带时区的 UTC 当前时间，与数据库中存储的时间格式一致"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


def days_between(start: datetime, end: datetime) -> int:
    """计算两个时间之间的整天数（向下取整）

    公式：floor((end - start) / 1天)
    """
    return math.floor((end - start).total_seconds() / 86400)


def round_half_up(value: float) -> int:
    """四舍五入到整数，.5 向上取整（与 Python 内置 round 的银行家舍入不同）"""
    return math.floor(value + 0.5)


def contains_text(haystack, needle: str) -> bool:
    """不区分大小写的子串判断，haystack 为空时视为不匹配"""
    if not haystack:
        return False
    return needle.lower() in haystack.lower()
