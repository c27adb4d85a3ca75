"""Audit registry — upload validation, listing, lookup and deletion.

Rule: No SQLAlchemy / no FastAPI here. Pure Python business logic against
the Store contract and FileStorage.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date, datetime
from pathlib import PurePath

from audit_dashboard.core.exceptions import NotFoundError, ValidationError
from audit_dashboard.domain import Audit, AuditStatus
from audit_dashboard.repositories.files import FileStorage, StoredFile
from audit_dashboard.repositories.store import MAX_ID, AuditFilter, Store

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS: dict[str, str] = {
    ".pdf": "application/pdf",
    ".doc": "application/msword",
    ".docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    ".xls": "application/vnd.ms-excel",
    ".xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    ".csv": "text/csv",
}


@dataclass(frozen=True)
class UploadedFile:
    filename: str
    content_type: str | None
    content: bytes


@dataclass
class AuditUpload:
    """Raw upload fields as received from the client (unvalidated)."""

    company_id: str | int | None
    audit_date: str | date | None
    branch_number: str | None
    status: str | None
    description: str | None = None
    file: UploadedFile | None = None


def parse_date(value: str | date | None) -> date | None:
    """Parse an ISO-8601 date (a full timestamp is accepted and truncated)."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = value.strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        return None


def _parse_int(value: str | int | None) -> int | None:
    """Parse a positive id; anything else (including out-of-range ints) is None."""
    if value is None:
        return None
    try:
        number = value if isinstance(value, int) else int(str(value).strip())
    except ValueError:
        return None
    return number if 1 <= number <= MAX_ID else None


class AuditService:
    def __init__(self, store: Store, files: FileStorage, max_upload_bytes: int):
        self._store = store
        self._files = files
        self._max_upload_bytes = max_upload_bytes

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def list_audits(
        self,
        *,
        company: str | None = None,
        company_id: int | None = None,
        status: str | None = None,
        date_from: date | None = None,
        date_to: date | None = None,
        offset: int = 0,
        limit: int | None = 50,
    ) -> tuple[list[Audit], int]:
        if company:
            found = await self._store.find_company(company)
            if found is None:
                return [], 0
            if company_id is not None and company_id != found.id:
                return [], 0
            company_id = found.id

        filters = AuditFilter(
            company_id=company_id, status=status, date_from=date_from, date_to=date_to,
        )
        return await self._store.list_audits(filters, offset=offset, limit=limit)

    async def get_audit(self, audit_id: int) -> Audit:
        audit = await self._store.get_audit(audit_id)
        if not audit:
            raise NotFoundError("Audit", audit_id)
        return audit

    async def company_names(self) -> dict[int, str]:
        return {c.id: c.display_name for c in await self._store.list_companies()}

    # ------------------------------------------------------------------
    # Upload
    # ------------------------------------------------------------------

    def _check_file(self, file: UploadedFile | None) -> str | None:
        if file is None or not file.filename:
            return "A file is required" if self._files.requires_content else None
        ext = PurePath(file.filename).suffix.lower()
        if ext not in ALLOWED_EXTENSIONS:
            return "Only PDF, DOC, DOCX, XLS, XLSX, and CSV files are allowed"
        if not file.content:
            return "Uploaded file is empty"
        if len(file.content) > self._max_upload_bytes:
            limit_mb = self._max_upload_bytes // (1024 * 1024)
            return f"File size exceeds the {limit_mb}MB limit"
        return None

    async def upload(self, data: AuditUpload, uploader_id: int | None) -> Audit:
        """Validate every field (reporting all failures in order), store the
        file, then insert the row. Nothing is persisted when validation fails."""
        errors: list[dict] = []

        company_id = _parse_int(data.company_id)
        company = await self._store.get_company(company_id) if company_id else None
        if company is None:
            errors.append({"field": "company_id", "message": "Company does not exist"})

        audit_date = parse_date(data.audit_date)
        if audit_date is None:
            errors.append({"field": "audit_date", "message": "Must be a valid ISO-8601 date"})

        branch_number = (data.branch_number or "").strip()
        if not branch_number:
            errors.append({"field": "branch_number", "message": "Branch number is required"})

        status = (data.status or "").strip()
        if status not in AuditStatus.values():
            allowed = ", ".join(AuditStatus.values())
            errors.append({"field": "status", "message": f"Status must be one of: {allowed}"})

        file_error = self._check_file(data.file)
        if file_error:
            errors.append({"field": "file", "message": file_error})

        if errors:
            raise ValidationError("Validation failed", details=errors)

        stored, file_type = self._store_file(data.file)
        description = (data.description or "").strip() or None
        try:
            audit = await self._store.insert_audit(
                company_id=company.id,
                filename=stored.filename,
                original_filename=data.file.filename if data.file else stored.filename,
                file_path=stored.path,
                file_size=stored.size,
                file_type=file_type,
                audit_date=audit_date,
                branch_number=branch_number,
                description=description,
                status=status,
                uploaded_by=uploader_id,
            )
        except Exception:
            self._discard_file(stored.path)
            raise

        logger.info(
            "Audit %s uploaded for company %s (status=%s, %d bytes)",
            audit.id, company.name, status, stored.size,
        )
        return audit

    def _store_file(self, file: UploadedFile | None) -> tuple[StoredFile, str]:
        if file is None or not file.filename:
            # Only reachable when the file storage does not require content.
            placeholder = f"audit_{datetime.now():%Y%m%d%H%M%S}.pdf"
            return self._files.save(placeholder, b""), ALLOWED_EXTENSIONS[".pdf"]
        ext = PurePath(file.filename).suffix.lower()
        file_type = file.content_type or ALLOWED_EXTENSIONS[ext]
        if file_type == "application/octet-stream":
            file_type = ALLOWED_EXTENSIONS[ext]
        return self._files.save(file.filename, file.content), file_type

    def _discard_file(self, path: str) -> None:
        try:
            self._files.remove(path)
        except OSError as exc:
            logger.warning("Could not remove stored file %s: %s", path, exc)

    # ------------------------------------------------------------------
    # Delete
    # ------------------------------------------------------------------

    async def delete_audit(self, audit_id: int) -> None:
        audit = await self.get_audit(audit_id)
        file_path = audit.file_path
        deleted = await self._store.delete_audit(audit_id)
        if not deleted:
            raise NotFoundError("Audit", audit_id)
        # The row is gone either way; a stray file is logged, not fatal.
        self._discard_file(file_path)
        logger.info("Audit %s deleted", audit_id)
