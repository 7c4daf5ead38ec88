"""Secure file データモデル"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timedelta
from typing import Any

DEFAULT_FILE_BASE_PATH = "/v1/secure-file"
DEFAULT_LIST_BASE_PATH = "/v1/secure-files"


def _parse_ts(value: Any) -> datetime:
    if not isinstance(value, str):
        raise TypeError(f"timestamp must be a string, got {type(value).__name__}")
    return datetime.fromisoformat(value)


def _format_ts(value: datetime) -> str:
    text = value.isoformat(timespec="milliseconds")
    if value.utcoffset() == timedelta(0):
        text = text.removesuffix("+00:00") + "Z"
    return text


@dataclass(frozen=True)
class SecureFileSummary:
    """保存済みファイル 1 件のメタデータ。"""

    sdbox_id: str
    path: str
    size_in_bytes: int
    name: str
    created_by: str
    created_ts: datetime
    last_updated_by: str
    last_updated_ts: datetime

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SecureFileSummary:
        size = data["size_in_bytes"]
        if isinstance(size, bool) or not isinstance(size, int):
            raise TypeError(f"size_in_bytes must be an integer, got {size!r}")
        return cls(
            sdbox_id=data["sdbox_id"],
            path=data["path"],
            size_in_bytes=size,
            name=data["name"],
            created_by=data.get("created_by", ""),
            created_ts=_parse_ts(data["created_ts"]),
            last_updated_by=data.get("last_updated_by", ""),
            last_updated_ts=_parse_ts(data["last_updated_ts"]),
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "sdbox_id": self.sdbox_id,
            "path": self.path,
            "size_in_bytes": self.size_in_bytes,
            "name": self.name,
            "created_by": self.created_by,
            "created_ts": _format_ts(self.created_ts),
            "last_updated_by": self.last_updated_by,
            "last_updated_ts": _format_ts(self.last_updated_ts),
        }


@dataclass(frozen=True)
class SecureFilesResponse:
    """ファイル一覧の 1 ページとページネーション状態。

    ``result_count`` は常に ``len(summaries)`` と一致し、
    ``has_next`` が False のとき ``next_offset`` は None になる。
    """

    has_next: bool
    next_offset: int | None
    limit: int
    offset: int
    result_count: int
    total_count: int
    summaries: tuple[SecureFileSummary, ...] = ()

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SecureFilesResponse:
        summaries = tuple(
            SecureFileSummary.from_dict(s) for s in data.get("secure_file_summaries") or []
        )
        result_count = int(data["file_count_in_result"])
        if result_count != len(summaries):
            raise ValueError(
                f"file_count_in_result is {result_count} but "
                f"{len(summaries)} summaries were returned"
            )
        has_next = data["has_next"]
        if not isinstance(has_next, bool):
            raise TypeError(f"has_next must be a boolean, got {has_next!r}")
        next_offset = data.get("next_offset")
        return cls(
            has_next=has_next,
            next_offset=int(next_offset) if has_next and next_offset is not None else None,
            limit=int(data["limit"]),
            offset=int(data["offset"]),
            result_count=result_count,
            total_count=int(data["total_file_count"]),
            summaries=summaries,
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "has_next": self.has_next,
            "next_offset": self.next_offset,
            "limit": self.limit,
            "offset": self.offset,
            "file_count_in_result": self.result_count,
            "total_file_count": self.total_count,
            "secure_file_summaries": [s.to_dict() for s in self.summaries],
        }


@dataclass
class SecureFileConfig:
    """Secure file クライアント設定。"""

    server_url: str
    file_base_path: str = DEFAULT_FILE_BASE_PATH
    list_base_path: str = DEFAULT_LIST_BASE_PATH
    timeout_seconds: float = 10.0
    headers: dict[str, str] = field(default_factory=dict)
    chunk_size: int = 64 * 1024
