"""Aggregate statistics response schemas."""


from datetime import date

from audit_dashboard.schemas.common import ApiModel

class StatusCount(ApiModel):
    status: str
    count: int

class CompanyBreakdown(ApiModel):
    company_id: int
    company: str
    display_name: str
    count: int
    approved: int
    approved_with_warning: int
    rejected: int
    last_audit_date: date | None = None

class StatsOverview(ApiModel):
    status_breakdown: list[StatusCount]
    company_breakdown: list[CompanyBreakdown]
    recent_audits: int
