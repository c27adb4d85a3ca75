"""Company endpoints — read-only, enriched with audit counts."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Path, Query

from audit_dashboard.core.pagination import PaginationParams
from audit_dashboard.core.response import CollectionResponse, DataResponse, ListResponse, paginated
from audit_dashboard.domain import AuditStatus
from audit_dashboard.repositories.store import MAX_ID, Store
from audit_dashboard.routers.deps import get_store
from audit_dashboard.schemas.audit import AuditOut
from audit_dashboard.schemas.company import CompanyOut
from audit_dashboard.services.company import CompanyService

router = APIRouter(prefix="/companies", tags=["Companies"])


@router.get("", response_model=CollectionResponse[CompanyOut])
async def list_companies(store: Store = Depends(get_store)):
    summaries = await CompanyService(store).list_companies()
    return {"data": [CompanyOut(**s.as_company_summary()) for s in summaries]}


@router.get("/name/{name}", response_model=DataResponse[CompanyOut])
async def get_company_by_name(name: str, store: Store = Depends(get_store)):
    summary = await CompanyService(store).get_company_by_name(name)
    return {"data": CompanyOut(**summary.as_company_summary())}


@router.get("/{company_id}", response_model=DataResponse[CompanyOut])
async def get_company(company_id: int = Path(ge=1, le=MAX_ID), store: Store = Depends(get_store)):
    summary = await CompanyService(store).get_company(company_id)
    return {"data": CompanyOut(**summary.as_company_summary())}


@router.get("/{company_id}/audits", response_model=ListResponse[AuditOut])
async def list_company_audits(
    company_id: int = Path(ge=1, le=MAX_ID),
    filter_status: Optional[AuditStatus] = Query(default=None, alias="status"),
    pagination: PaginationParams = Depends(),
    store: Store = Depends(get_store),
):
    """Audits of one company, newest first. Filter by ?status=aprovada|aprovada-com-aviso|reprovada."""
    company, items, total = await CompanyService(store).list_company_audits(
        company_id,
        status=filter_status.value if filter_status else None,
        offset=pagination.offset,
        limit=pagination.limit,
    )
    return paginated(
        [AuditOut.model_validate(a).model_copy(update={"company_name": company.display_name}) for a in items],
        total, pagination.limit, pagination.offset,
    )
