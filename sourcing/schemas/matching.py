"""供应商匹配数据结构定义

匹配结果只存在于内存中，不落库
"""

from pydantic import BaseModel
from typing import List, Optional
from datetime import datetime

from .profile import SupplierCandidate
from .quote import UnassignedQuote


class ScoreBreakdown(BaseModel):
    """各项得分明细"""
    specialization: int  # 品类匹配 0/20/40
    capacity: int        # 产能余量 0/5/15/25
    rating: float        # 评分 0-20
    on_time_delivery: float  # 准时交付 0-15

    @property
    def raw_total(self) -> float:
        return self.specialization + self.capacity + self.rating + self.on_time_delivery


class SupplierMatch(BaseModel):
    """某报价与某供应商的匹配结果"""
    quote_id: int
    supplier: SupplierCandidate
    match_score: int
    breakdown: ScoreBreakdown
    reasons: List[str] = []


class RecommendationResponse(BaseModel):
    quote_id: int
    total_candidates: int
    matches: List[SupplierMatch]
    error: Optional[str] = None


class AssignRequest(BaseModel):
    """手动分配请求，supplier_id 为空时拒绝写入"""
    supplier_id: Optional[int] = None


class AssignmentResult(BaseModel):
    quote_id: int
    supplier_id: int
    status: str
    assigned_at: datetime
    match_score: Optional[int] = None
    message: str = "Supplier assigned successfully!"


class QueueEntry(BaseModel):
    """待分配队列中的一行：报价 + 排名第一的供应商预览"""
    quote: UnassignedQuote
    top_match: Optional[SupplierMatch] = None


class QueueResponse(BaseModel):
    items: List[QueueEntry]
    total: int
    error: Optional[str] = None


class MatchingOverview(BaseModel):
    """匹配看板统计"""
    unassigned_quotes: int
    high_urgency: int
    available_suppliers: int
    average_match_score: int
    error: Optional[str] = None


class PlannedAssignment(BaseModel):
    """批量计划中的一项；supplier_id 为空表示没有可用供应商"""
    quote_id: int
    urgency: str
    supplier_id: Optional[int] = None
    company_name: Optional[str] = None
    match_score: Optional[int] = None
    reserved_workload: Optional[int] = None  # 计入本批次预留后的工作量
    note: Optional[str] = None


class PlanResponse(BaseModel):
    items: List[PlannedAssignment]
    total: int
    error: Optional[str] = None


class AutoAssignOutcome(BaseModel):
    quote_id: int
    supplier_id: Optional[int] = None
    assigned: bool
    detail: str


class AutoAssignResponse(BaseModel):
    assigned: int
    failed: int
    outcomes: List[AutoAssignOutcome]
