"""User repository."""


from audit_dashboard.domain.user import User
from audit_dashboard.repositories.base import BaseRepository


class UserRepository(BaseRepository[User]):
    model = User

    async def get_by_email(self, email: str) -> User | None:
        return await self.get_by(email=email)
