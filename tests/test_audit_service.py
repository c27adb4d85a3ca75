"""
Audit registry unit tests — service layer over the in-memory store.
"""

import pytest

from audit_dashboard.core.exceptions import StorageError, ValidationError
from audit_dashboard.repositories.files import DiskFileStorage, FileStorage, TransientFileStorage
from audit_dashboard.repositories.memory_store import MemoryDatabase, MemoryStore
from audit_dashboard.services.audit import AuditService, AuditUpload, UploadedFile, parse_date


class FailingRemoveStorage(TransientFileStorage):
    def remove(self, path: str) -> None:
        raise PermissionError(path)


class InsertFailsStore(MemoryStore):
    async def insert_audit(self, **fields):
        raise StorageError("insert_audit failed")


@pytest.fixture
def store() -> MemoryStore:
    return MemoryStore(MemoryDatabase())


def _upload(**overrides) -> AuditUpload:
    fields = {
        "company_id": "1",
        "audit_date": "2025-03-10",
        "branch_number": "001",
        "status": "aprovada",
        "file": UploadedFile("a.pdf", "application/pdf", b"0123456789"),
    }
    fields.update(overrides)
    return AuditUpload(**fields)


async def _service(store: MemoryStore, files: FileStorage | None = None, max_bytes: int = 1024) -> AuditService:
    await store.ensure_company("carol", "Carol")
    return AuditService(store, files or TransientFileStorage(), max_bytes)


async def test_oversized_file_is_rejected(store: MemoryStore):
    svc = await _service(store, max_bytes=5)

    with pytest.raises(ValidationError) as exc_info:
        await svc.upload(_upload(), uploader_id=None)

    assert exc_info.value.details[0]["field"] == "file"
    assert (await store.list_audits())[1] == 0


async def test_empty_file_is_rejected(store: MemoryStore):
    svc = await _service(store)

    with pytest.raises(ValidationError):
        await svc.upload(_upload(file=UploadedFile("a.pdf", "application/pdf", b"")), uploader_id=None)


async def test_description_blank_becomes_none(store: MemoryStore):
    svc = await _service(store)

    audit = await svc.upload(_upload(description="   "), uploader_id=None)

    assert audit.description is None


async def test_file_removal_failure_does_not_fail_delete(store: MemoryStore):
    svc = await _service(store, files=FailingRemoveStorage())
    audit = await svc.upload(_upload(), uploader_id=None)

    await svc.delete_audit(audit.id)

    assert await store.get_audit(audit.id) is None


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("2025-03-10", "2025-03-10"),
        ("2025-03-10T08:30:00Z", "2025-03-10"),
        ("10/03/2025", None),
        ("", None),
        (None, None),
    ],
)
def test_parse_date(raw, expected):
    parsed = parse_date(raw)

    assert (parsed.isoformat() if parsed else None) == expected


@pytest.mark.parametrize("raw", ["²", "0", "-1", "1.5", "99999999999999999999999"])
async def test_company_id_outside_the_id_range_is_a_field_error(store: MemoryStore, raw):
    svc = await _service(store)

    with pytest.raises(ValidationError) as exc_info:
        await svc.upload(_upload(company_id=raw), uploader_id=None)

    assert [d["field"] for d in exc_info.value.details] == ["company_id"]


async def test_stored_file_is_removed_when_insert_fails(tmp_path):
    failing = InsertFailsStore(MemoryDatabase())
    svc = await _service(failing, files=DiskFileStorage(tmp_path / "uploads"))

    with pytest.raises(StorageError):
        await svc.upload(_upload(), uploader_id=None)

    assert list((tmp_path / "uploads").glob("*")) == []
