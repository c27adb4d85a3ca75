"""Storage for uploaded audit files.

Two implementations mirror the two record backends:

  DiskFileStorage       — writes under UPLOAD_DIR; pairs with the SQL store
  TransientFileStorage  — keeps bytes in process memory; pairs with the memory store
"""

from __future__ import annotations

import logging
import re
import uuid
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

_UNSAFE_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def _safe_name(original: str) -> str:
    name = Path(original).name  # strip any client-side directories
    return _UNSAFE_CHARS.sub("_", name).strip("._") or "upload"


@dataclass(frozen=True)
class StoredFile:
    filename: str
    path: str
    size: int


class FileStorage:
    """Base class; ``requires_content`` says whether an upload must carry a file."""

    requires_content: bool = True

    def save(self, original_filename: str, content: bytes) -> StoredFile:
        raise NotImplementedError

    def remove(self, path: str) -> None:
        raise NotImplementedError

    @staticmethod
    def make_filename(original_filename: str) -> str:
        return f"{uuid.uuid4()}-{_safe_name(original_filename)}"


class DiskFileStorage(FileStorage):
    def __init__(self, root: str | Path):
        self._root = Path(root)

    @property
    def root(self) -> Path:
        return self._root

    def save(self, original_filename: str, content: bytes) -> StoredFile:
        self._root.mkdir(parents=True, exist_ok=True)
        filename = self.make_filename(original_filename)
        target = self._root / filename
        target.write_bytes(content)
        logger.debug("Stored %d bytes at %s", len(content), target)
        return StoredFile(filename=filename, path=str(target), size=len(content))

    def remove(self, path: str) -> None:
        """Delete a stored file. Raises OSError when removal fails."""
        Path(path).unlink()


class TransientFileStorage(FileStorage):
    """Process-lifetime file storage; content is optional."""

    requires_content = False

    def __init__(self) -> None:
        self._blobs: dict[str, bytes] = {}

    def save(self, original_filename: str, content: bytes) -> StoredFile:
        filename = self.make_filename(original_filename)
        path = f"memory://{filename}"
        self._blobs[path] = content
        return StoredFile(filename=filename, path=path, size=len(content))

    def remove(self, path: str) -> None:
        if self._blobs.pop(path, None) is None:
            raise FileNotFoundError(path)

    @property
    def count(self) -> int:
        return len(self._blobs)

    def clear(self) -> None:
        self._blobs.clear()
