"""供应商匹配核心

- urgency: 报价紧急程度推导
- loaders: 待分配报价与已认证供应商的加载
- matcher: 匹配评分与排序
- planner: 批量分配计划（带工作量预留）
- assignment: 分配写入
- dashboard: 看板统计
"""
