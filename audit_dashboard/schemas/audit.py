"""Audit Pydantic schemas."""


from datetime import date, datetime

from audit_dashboard.schemas.common import ApiModel

class AuditOut(ApiModel):
    id: int
    company_id: int
    company_name: str | None = None
    filename: str
    original_filename: str
    file_size: int
    file_type: str
    audit_date: date
    branch_number: str
    description: str | None = None
    status: str
    uploaded_by: int | None = None
    created_at: datetime
    updated_at: datetime
