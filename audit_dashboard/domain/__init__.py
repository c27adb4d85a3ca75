"""Domain package — all ORM models are imported here so Alembic autogenerate detects them.

Folder intent:
  company.py  — seeded companies (read-only through the API)
  user.py     — admin accounts
  audit.py    — uploaded audit records + AuditStatus enum
  news.py     — dashboard news items
  mixins.py   — shared TimestampMixin
"""

from audit_dashboard.domain.audit import Audit, AuditStatus
from audit_dashboard.domain.company import DEFAULT_COMPANIES, Company
from audit_dashboard.domain.news import News
from audit_dashboard.domain.user import User

__all__ = [
    "Audit",
    "AuditStatus",
    "Company",
    "DEFAULT_COMPANIES",
    "News",
    "User",
]
