"""Audit statistics — derived on every read from the current audit collection.

Nothing here is cached or maintained incrementally: each call scans the
audits it is given, so results always reflect the latest inserts and
deletes. That full scan is fine for the expected low thousands of rows and is
the first thing to revisit if volumes grow.

The pure functions take plain sequences so they can be used (and tested)
without a store; :class:`StatsService` feeds them from a :class:`Store`.
"""

from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field
from datetime import date, datetime, timedelta, timezone

from audit_dashboard.domain import Audit, AuditStatus, Company
from audit_dashboard.repositories.store import AuditFilter, Store


@dataclass
class CompanyStats:
    company_id: int
    name: str
    display_name: str
    total: int = 0
    by_status: dict[str, int] = field(default_factory=dict)
    last_audit_date: date | None = None

    def count(self, status: AuditStatus) -> int:
        return self.by_status.get(status.value, 0)

    def as_breakdown(self) -> dict:
        return {
            "company_id": self.company_id,
            "company": self.name,
            "display_name": self.display_name,
            "count": self.total,
            "approved": self.count(AuditStatus.APPROVED),
            "approved_with_warning": self.count(AuditStatus.APPROVED_WITH_WARNING),
            "rejected": self.count(AuditStatus.REJECTED),
            "last_audit_date": self.last_audit_date,
        }

    def as_company_summary(self) -> dict:
        return {
            "id": self.company_id,
            "name": self.name,
            "display_name": self.display_name,
            "total_audits": self.total,
            "approved_audits": self.count(AuditStatus.APPROVED),
            "approved_with_warning_audits": self.count(AuditStatus.APPROVED_WITH_WARNING),
            "rejected_audits": self.count(AuditStatus.REJECTED),
            "last_audit_date": self.last_audit_date,
        }


def _as_utc(value: datetime) -> datetime:
    # SQLite hands back naive datetimes; they were written as UTC.
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def status_breakdown(audits: Iterable[Audit]) -> list[dict]:
    """Count audits per status, every status listed (zero when absent)."""
    counts = Counter(a.status for a in audits)
    return [{"status": s, "count": counts.get(s, 0)} for s in AuditStatus.values()]


def company_stats(companies: Sequence[Company], audits: Iterable[Audit]) -> list[CompanyStats]:
    """One entry per company, in the order the companies were given."""
    stats = {
        c.id: CompanyStats(company_id=c.id, name=c.name, display_name=c.display_name)
        for c in companies
    }
    for audit in audits:
        entry = stats.get(audit.company_id)
        if entry is None:
            continue
        entry.total += 1
        entry.by_status[audit.status] = entry.by_status.get(audit.status, 0) + 1
        if entry.last_audit_date is None or audit.audit_date > entry.last_audit_date:
            entry.last_audit_date = audit.audit_date
    return list(stats.values())


def company_breakdown(companies: Sequence[Company], audits: Iterable[Audit]) -> list[dict]:
    return [entry.as_breakdown() for entry in company_stats(companies, audits)]


def recent_count(audits: Iterable[Audit], now: datetime | None = None, days: int = 30) -> int:
    """Audits created within the trailing ``days`` window ending at ``now``."""
    now = _as_utc(now or datetime.now(timezone.utc))
    cutoff = now - timedelta(days=days)
    return sum(1 for a in audits if cutoff <= _as_utc(a.created_at) <= now)


def overview(
    companies: Sequence[Company],
    audits: Sequence[Audit],
    now: datetime | None = None,
    days: int = 30,
) -> dict:
    return {
        "status_breakdown": status_breakdown(audits),
        "company_breakdown": company_breakdown(companies, audits),
        "recent_audits": recent_count(audits, now=now, days=days),
    }


class StatsService:
    def __init__(self, store: Store, recent_window_days: int = 30):
        self._store = store
        self._window = recent_window_days

    async def _all_audits(self, company_id: int | None = None) -> list[Audit]:
        audits, _ = await self._store.list_audits(AuditFilter(company_id=company_id))
        return audits

    async def overview(self, now: datetime | None = None) -> dict:
        companies = await self._store.list_companies()
        audits = await self._all_audits()
        return overview(companies, audits, now=now, days=self._window)

    async def company_summaries(self) -> list[CompanyStats]:
        companies = await self._store.list_companies()
        return company_stats(companies, await self._all_audits())

    async def company_summary(self, company: Company) -> CompanyStats:
        return company_stats([company], await self._all_audits(company.id))[0]
