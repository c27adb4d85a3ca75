"""Company repository."""


from audit_dashboard.domain.company import Company
from audit_dashboard.repositories.base import BaseRepository


class CompanyRepository(BaseRepository[Company]):
    model = Company

    async def get_by_name(self, name: str) -> Company | None:
        return await self.get_by(name=name)

    async def list_by_display_name(self) -> list[Company]:
        q = self._base_query().order_by(Company.display_name.asc(), Company.id.asc())
        return list((await self._session.execute(q)).scalars().all())
