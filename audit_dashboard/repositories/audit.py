"""Audit repository — conjunctive filtering over company, status and audit_date range."""


from audit_dashboard.domain.audit import Audit
from audit_dashboard.repositories.base import BaseRepository
from audit_dashboard.repositories.store import AuditFilter


class AuditRepository(BaseRepository[Audit]):
    model = Audit

    async def search(
        self, filters: AuditFilter, *, offset: int = 0, limit: int | None = None
    ) -> tuple[list[Audit], int]:
        q = self._base_query()
        if filters.company_id is not None:
            q = q.where(Audit.company_id == filters.company_id)
        if filters.status is not None:
            q = q.where(Audit.status == filters.status)
        if filters.date_from is not None:
            q = q.where(Audit.audit_date >= filters.date_from)
        if filters.date_to is not None:
            q = q.where(Audit.audit_date <= filters.date_to)
        return await self._page(q, offset=offset, limit=limit)
