"""News repository — newest news_date first, then newest created."""


from audit_dashboard.domain.news import News
from audit_dashboard.repositories.base import BaseRepository


class NewsRepository(BaseRepository[News]):
    model = News
    default_order = ("news_date", "created_at", "id")
