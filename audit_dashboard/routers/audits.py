"""Audit endpoints — listing, statistics, multipart upload, deletion.

Pattern:
  1. Inject the request-scoped Store (+ settings / file storage where needed)
  2. Instantiate the service
  3. Call service methods and wrap the result in the response envelope
"""

from __future__ import annotations

import logging
from datetime import date
from typing import Optional

from fastapi import APIRouter, Depends, File, Form, Path, Query, UploadFile, status

from audit_dashboard.core.config import Settings
from audit_dashboard.core.pagination import AuditPaginationParams
from audit_dashboard.core.response import DataResponse, ListResponse, paginated
from audit_dashboard.domain import Audit, AuditStatus
from audit_dashboard.repositories.files import FileStorage
from audit_dashboard.repositories.store import MAX_ID, Store
from audit_dashboard.routers.deps import get_current_user, get_file_storage, get_settings, get_store
from audit_dashboard.schemas.audit import AuditOut
from audit_dashboard.schemas.stats import StatsOverview
from audit_dashboard.services.audit import AuditService, AuditUpload, UploadedFile
from audit_dashboard.services.auth import Principal
from audit_dashboard.services.stats import StatsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/audits", tags=["Audits"])


# ------------------------------------------------------------------
# Helpers
# ------------------------------------------------------------------

def _svc(
    store: Store = Depends(get_store),
    files: FileStorage = Depends(get_file_storage),
    settings: Settings = Depends(get_settings),
) -> AuditService:
    return AuditService(store, files, settings.max_upload_size_bytes)


def _out(audit: Audit, names: dict[int, str]) -> AuditOut:
    return AuditOut.model_validate(audit).model_copy(
        update={"company_name": names.get(audit.company_id)}
    )


# ------------------------------------------------------------------
# Endpoints
# ------------------------------------------------------------------

@router.get("", response_model=ListResponse[AuditOut])
async def list_audits(
    company: Optional[str] = Query(default=None, description="Company internal name, e.g. carol"),
    company_id: Optional[int] = Query(default=None, ge=1, le=MAX_ID),
    filter_status: Optional[AuditStatus] = Query(default=None, alias="status"),
    date_from: Optional[date] = Query(default=None),
    date_to: Optional[date] = Query(default=None),
    pagination: AuditPaginationParams = Depends(),
    svc: AuditService = Depends(_svc),
):
    """List audits newest first. All supplied filters must match."""
    items, total = await svc.list_audits(
        company=company,
        company_id=company_id,
        status=filter_status.value if filter_status else None,
        date_from=date_from,
        date_to=date_to,
        offset=pagination.offset,
        limit=pagination.limit,
    )
    names = await svc.company_names()
    return paginated([_out(a, names) for a in items], total, pagination.limit, pagination.offset)


@router.get("/stats/overview", response_model=StatsOverview)
async def stats_overview(
    store: Store = Depends(get_store),
    settings: Settings = Depends(get_settings),
):
    return await StatsService(store, settings.recent_window_days).overview()


@router.post("/upload", response_model=DataResponse[AuditOut], status_code=status.HTTP_201_CREATED)
async def upload_audit(
    file: Optional[UploadFile] = File(default=None),
    company_id: Optional[str] = Form(default=None),
    audit_date: Optional[str] = Form(default=None),
    branch_number: Optional[str] = Form(default=None),
    description: Optional[str] = Form(default=None),
    audit_status: Optional[str] = Form(default=None, alias="status"),
    user: Principal = Depends(get_current_user),
    svc: AuditService = Depends(_svc),
):
    """Multipart upload: file, company_id, audit_date, branch_number, description, status."""
    uploaded = None
    if file is not None and file.filename:
        uploaded = UploadedFile(
            filename=file.filename,
            content_type=file.content_type,
            content=await file.read(),
        )

    audit = await svc.upload(
        AuditUpload(
            company_id=company_id,
            audit_date=audit_date,
            branch_number=branch_number,
            status=audit_status,
            description=description,
            file=uploaded,
        ),
        uploader_id=user.id,
    )
    return {"data": _out(audit, await svc.company_names())}


@router.get("/{audit_id}", response_model=DataResponse[AuditOut])
async def get_audit(audit_id: int = Path(ge=1, le=MAX_ID), svc: AuditService = Depends(_svc)):
    audit = await svc.get_audit(audit_id)
    return {"data": _out(audit, await svc.company_names())}


@router.delete("/{audit_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_audit(
    audit_id: int = Path(ge=1, le=MAX_ID),
    _: Principal = Depends(get_current_user),
    svc: AuditService = Depends(_svc),
):
    await svc.delete_audit(audit_id)
