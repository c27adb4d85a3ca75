"""Company registry — read-only lookups enriched with per-company statistics."""


from audit_dashboard.core.exceptions import NotFoundError
from audit_dashboard.domain import Audit, Company
from audit_dashboard.repositories.store import AuditFilter, Store
from audit_dashboard.services.stats import CompanyStats, StatsService

class CompanyService:
    def __init__(self, store: Store):
        self._store = store
        self._stats = StatsService(store)

    async def list_companies(self) -> list[CompanyStats]:
        return await self._stats.company_summaries()

    async def _require(self, company: Company | None, key: str | int) -> Company:
        if company is None:
            raise NotFoundError("Company", key)
        return company

    async def get_company(self, company_id: int) -> CompanyStats:
        company = await self._require(await self._store.get_company(company_id), company_id)
        return await self._stats.company_summary(company)

    async def get_company_by_name(self, name: str) -> CompanyStats:
        company = await self._require(await self._store.find_company(name), name)
        return await self._stats.company_summary(company)

    async def list_company_audits(
        self, company_id: int, *, status: str | None = None, offset: int = 0, limit: int | None = 20,
    ) -> tuple[Company, list[Audit], int]:
        company = await self._require(await self._store.get_company(company_id), company_id)
        items, total = await self._store.list_audits(
            AuditFilter(company_id=company.id, status=status), offset=offset, limit=limit,
        )
        return company, items, total
