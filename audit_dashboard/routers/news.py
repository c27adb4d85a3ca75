"""News endpoints — public reads, authenticated writes."""


from fastapi import APIRouter, Depends, Path, status

from audit_dashboard.core.pagination import PaginationParams
from audit_dashboard.core.response import DataResponse, ListResponse, paginated
from audit_dashboard.repositories.store import MAX_ID, Store
from audit_dashboard.routers.deps import get_current_user, get_store
from audit_dashboard.schemas.news import NewsCreate, NewsOut, NewsUpdate
from audit_dashboard.services.auth import Principal
from audit_dashboard.services.news import NewsService

router = APIRouter(prefix="/news", tags=["News"])


@router.get("", response_model=ListResponse[NewsOut])
async def list_news(
    pagination: PaginationParams = Depends(),
    store: Store = Depends(get_store),
):
    """List news items, newest news_date first."""
    items, total = await NewsService(store).list_news(offset=pagination.offset, limit=pagination.limit)
    return paginated(
        [NewsOut.model_validate(n) for n in items],
        total, pagination.limit, pagination.offset,
    )


@router.post("", response_model=DataResponse[NewsOut], status_code=status.HTTP_201_CREATED)
async def create_news(
    body: NewsCreate,
    user: Principal = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    news = await NewsService(store).create_news(body, author_id=user.id)
    return {"data": NewsOut.model_validate(news)}


@router.get("/{news_id}", response_model=DataResponse[NewsOut])
async def get_news(news_id: int = Path(ge=1, le=MAX_ID), store: Store = Depends(get_store)):
    news = await NewsService(store).get_news(news_id)
    return {"data": NewsOut.model_validate(news)}


@router.put("/{news_id}", response_model=DataResponse[NewsOut])
async def update_news(
    body: NewsUpdate,
    news_id: int = Path(ge=1, le=MAX_ID),
    _: Principal = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    news = await NewsService(store).update_news(news_id, body)
    return {"data": NewsOut.model_validate(news)}


@router.delete("/{news_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_news(
    news_id: int = Path(ge=1, le=MAX_ID),
    _: Principal = Depends(get_current_user),
    store: Store = Depends(get_store),
):
    await NewsService(store).delete_news(news_id)
