"""News registry — create, partial update, delete.

Field rules (title 1-200, summary 1-1000, ISO news_date) live on the
NewsCreate / NewsUpdate schemas; this service enforces the rules that need
the payload as a whole or the store.
"""


import logging

from audit_dashboard.core.exceptions import NotFoundError, ValidationError
from audit_dashboard.domain import News
from audit_dashboard.repositories.store import Store
from audit_dashboard.schemas.news import NewsCreate, NewsUpdate

logger = logging.getLogger(__name__)

class NewsService:
    def __init__(self, store: Store):
        self._store = store

    async def list_news(self, *, offset: int = 0, limit: int | None = 20):
        return await self._store.list_news(offset=offset, limit=limit)

    async def get_news(self, news_id: int) -> News:
        news = await self._store.get_news(news_id)
        if not news:
            raise NotFoundError("News item", news_id)
        return news

    async def create_news(self, data: NewsCreate, author_id: int | None) -> News:
        fields = data.model_dump()
        fields["content"] = fields.get("content") or None
        news = await self._store.insert_news(created_by=author_id, **fields)
        logger.info("News %s created by user %s", news.id, author_id)
        return news

    async def update_news(self, news_id: int, data: NewsUpdate) -> News:
        changes = data.model_dump(exclude_unset=True)
        if not changes:
            raise ValidationError("No fields to update")
        updated = await self._store.update_news(news_id, **changes)
        if updated is None:
            raise NotFoundError("News item", news_id)
        return updated

    async def delete_news(self, news_id: int) -> None:
        deleted = await self._store.delete_news(news_id)
        if not deleted:
            raise NotFoundError("News item", news_id)
