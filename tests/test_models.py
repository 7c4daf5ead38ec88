"""Secure file モデルのユニットテスト"""

from __future__ import annotations

import copy
from datetime import datetime, timezone

import pytest
from secure_file_client.models import (
    DEFAULT_FILE_BASE_PATH,
    DEFAULT_LIST_BASE_PATH,
    SecureFileConfig,
    SecureFilesResponse,
    SecureFileSummary,
)

SUMMARY = {
    "sdbox_id": "3f40b0ca-f7e4-4e38-bf1f-c36e05e1856f",
    "path": "app/config/README.md",
    "size_in_bytes": 3296,
    "name": "README.md",
    "created_by": "ops@example.com",
    "created_ts": "2018-06-14T10:34:55.057Z",
    "last_updated_by": "dev@example.com",
    "last_updated_ts": "2018-06-15T08:00:00Z",
}

PAGE = {
    "has_next": True,
    "next_offset": 2,
    "limit": 2,
    "offset": 0,
    "file_count_in_result": 2,
    "total_file_count": 3,
    "secure_file_summaries": [SUMMARY, {**SUMMARY, "path": "app/config/other", "name": "other"}],
}


def test_summary_from_dict() -> None:
    """辞書から SecureFileSummary を生成できること。"""
    summary = SecureFileSummary.from_dict(SUMMARY)
    assert summary.sdbox_id == SUMMARY["sdbox_id"]
    assert summary.created_ts == datetime(2018, 6, 14, 10, 34, 55, 57000, tzinfo=timezone.utc)
    assert summary.last_updated_by == "dev@example.com"
    assert summary.last_updated_ts == datetime(2018, 6, 15, 8, 0, tzinfo=timezone.utc)


def test_summary_to_dict_uses_wire_keys() -> None:
    """SecureFileSummary がワイヤ形式のキーで辞書に変換されること。"""
    data = SecureFileSummary.from_dict(SUMMARY).to_dict()
    assert set(data) == set(SUMMARY)
    assert data["last_updated_ts"] == "2018-06-15T08:00:00.000Z"
    assert data["created_ts"] == "2018-06-14T10:34:55.057Z"


def test_summary_is_immutable() -> None:
    """SecureFileSummary が変更不可であること。"""
    summary = SecureFileSummary.from_dict(SUMMARY)
    with pytest.raises(AttributeError):
        summary.name = "changed"  # type: ignore[misc]


def test_summary_invalid_timestamp() -> None:
    """不正なタイムスタンプで ValueError になること。"""
    with pytest.raises(ValueError):
        SecureFileSummary.from_dict({**SUMMARY, "created_ts": "yesterday"})


def test_response_from_dict() -> None:
    """辞書から SecureFilesResponse を生成できること。"""
    page = SecureFilesResponse.from_dict(PAGE)
    assert page.has_next is True
    assert page.next_offset == 2
    assert page.result_count == len(page.summaries) == 2
    assert page.total_count == 3
    assert page.summaries[1].name == "other"


def test_response_round_trip() -> None:
    """デコード後に再エンコードしても全フィールドが保たれること。"""
    page = SecureFilesResponse.from_dict(PAGE)
    again = SecureFilesResponse.from_dict(page.to_dict())
    assert again == page


def test_response_no_next_clears_next_offset() -> None:
    """has_next が False なら next_offset が None になること。"""
    data = copy.deepcopy(PAGE)
    data["has_next"] = False
    page = SecureFilesResponse.from_dict(data)
    assert page.next_offset is None


def test_response_empty_page() -> None:
    """サマリーが null でも空のページとして扱えること。"""
    page = SecureFilesResponse.from_dict(
        {
            "has_next": False,
            "next_offset": None,
            "limit": 100,
            "offset": 0,
            "file_count_in_result": 0,
            "total_file_count": 0,
            "secure_file_summaries": None,
        }
    )
    assert page.summaries == ()
    assert page.result_count == 0


def test_response_count_mismatch() -> None:
    """件数とサマリー数が一致しない場合 ValueError になること。"""
    with pytest.raises(ValueError):
        SecureFilesResponse.from_dict({**PAGE, "file_count_in_result": 5})


def test_response_has_next_must_be_bool() -> None:
    """has_next が真偽値でない場合 TypeError になること。"""
    with pytest.raises(TypeError):
        SecureFilesResponse.from_dict({**PAGE, "has_next": "false"})


def test_config_defaults() -> None:
    """SecureFileConfig のデフォルト値が正しいこと。"""
    config = SecureFileConfig(server_url="http://cerberus:8080")
    assert config.file_base_path == DEFAULT_FILE_BASE_PATH == "/v1/secure-file"
    assert config.list_base_path == DEFAULT_LIST_BASE_PATH == "/v1/secure-files"
    assert config.timeout_seconds == 10.0
    assert config.headers == {}


@pytest.mark.parametrize("size", [1.9, True, "3296", None])
def test_summary_size_must_be_int(size: object) -> None:
    """size_in_bytes が整数でない場合 TypeError になること。"""
    with pytest.raises(TypeError):
        SecureFileSummary.from_dict({**SUMMARY, "size_in_bytes": size})
