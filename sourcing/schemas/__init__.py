"""API数据模型模块

定义所有 Pydantic 模型（请求/响应结构体）
"""

from .profile import ProfileCreate, ProfileRead, SupplierCandidate, SupplierList
from .quote import QuoteCreate, QuoteRead, UnassignedQuote, UnassignedQuoteList
from .order import OrderCreate, OrderRead, OrderStatusUpdate
from .matching import (
    ScoreBreakdown,
    SupplierMatch,
    RecommendationResponse,
    AssignRequest,
    AssignmentResult,
    QueueEntry,
    QueueResponse,
    MatchingOverview,
    PlannedAssignment,
    PlanResponse,
    AutoAssignOutcome,
    AutoAssignResponse,
)

__all__ = [
    "ProfileCreate",
    "ProfileRead",
    "SupplierCandidate",
    "SupplierList",
    "QuoteCreate",
    "QuoteRead",
    "UnassignedQuote",
    "UnassignedQuoteList",
    "OrderCreate",
    "OrderRead",
    "OrderStatusUpdate",
    "ScoreBreakdown",
    "SupplierMatch",
    "RecommendationResponse",
    "AssignRequest",
    "AssignmentResult",
    "QueueEntry",
    "QueueResponse",
    "MatchingOverview",
    "PlannedAssignment",
    "PlanResponse",
    "AutoAssignOutcome",
    "AutoAssignResponse",
]
