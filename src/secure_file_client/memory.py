"""In-memory secure file client for testing."""

from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from .client import SecureFileClient
from .exceptions import LocalIOError, UnexpectedStatusError
from .models import SecureFilesResponse, SecureFileSummary


@dataclass
class _StoredFile:
    name: str
    content: bytes
    created_ts: datetime
    last_updated_ts: datetime


class InMemorySecureFileClient(SecureFileClient):
    """In-memory secure file client for testing."""

    def __init__(self, sdbox_id: str = "in-memory", principal: str = "test") -> None:
        self._sdbox_id = sdbox_id
        self._principal = principal
        self._files: dict[str, _StoredFile] = {}

    @property
    def stored_paths(self) -> list[str]:
        """Get a copy of stored remote paths."""
        return sorted(self._files)

    def list(self, root_path: str = "") -> SecureFilesResponse:
        prefix = root_path.strip("/")
        summaries = tuple(
            SecureFileSummary(
                sdbox_id=self._sdbox_id,
                path=path,
                size_in_bytes=len(f.content),
                name=f.name,
                created_by=self._principal,
                created_ts=f.created_ts,
                last_updated_by=self._principal,
                last_updated_ts=f.last_updated_ts,
            )
            for path, f in sorted(self._files.items())
            if not prefix or path == prefix or path.startswith(prefix + "/")
        )
        return SecureFilesResponse(
            has_next=False,
            next_offset=None,
            limit=len(summaries),
            offset=0,
            result_count=len(summaries),
            total_count=len(summaries),
            summaries=summaries,
        )

    def get(self, remote_path: str, local_dir: str | os.PathLike[str]) -> Path:
        stored = self._files.get(remote_path.strip("/"))
        if stored is None:
            raise UnexpectedStatusError(404, remote_path, "secure file not found")
        target = Path(local_dir) / stored.name
        try:
            target.write_bytes(stored.content)
        except OSError as e:
            raise LocalIOError(str(target), "error writing local file", cause=e) from e
        return target

    def put(self, remote_path: str, local_path: str | os.PathLike[str]) -> None:
        try:
            content = Path(local_path).read_bytes()
        except OSError as e:
            raise LocalIOError(os.fspath(local_path), "Failed to read upload file", cause=e) from e
        key = remote_path.strip("/")
        now = datetime.now(timezone.utc)
        existing = self._files.get(key)
        self._files[key] = _StoredFile(
            name=os.path.basename(os.fspath(local_path)),
            content=content,
            created_ts=existing.created_ts if existing else now,
            last_updated_ts=now,
        )
