"""Pagination helpers for list endpoints."""


from fastapi import Query
from pydantic import BaseModel


class PaginationParams:
    """FastAPI dependency for `?limit=20&offset=0`."""

    default_limit = 20

    def __init__(
        self,
        limit: int | None = Query(default=None, ge=1, le=500, description="Items per page"),
        offset: int = Query(default=0, ge=0, description="Number of items to skip"),
    ):
        self.limit = limit if limit is not None else self.default_limit
        self.offset = offset


class AuditPaginationParams(PaginationParams):
    """Audit listings default to a larger page."""

    default_limit = 50


class PageMeta(BaseModel):
    total: int
    limit: int
    offset: int
