"""Company response schema."""


from datetime import date

from audit_dashboard.schemas.common import ApiModel

class CompanyOut(ApiModel):
    id: int
    name: str
    display_name: str
    total_audits: int = 0
    approved_audits: int = 0
    approved_with_warning_audits: int = 0
    rejected_audits: int = 0
    last_audit_date: date | None = None
