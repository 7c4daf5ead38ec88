"""アップロード用 multipart/form-data エンコーダー"""

from __future__ import annotations

import io
import os
import secrets

from .exceptions import LocalIOError

DEFAULT_FIELD_NAME = "file-content"


def _quote(value: str) -> str:
    return value.replace("\\", "\\\\").replace('"', '\\"')


def content_type_for(boundary: str) -> str:
    """boundary を含む Content-Type ヘッダー値を返す。"""
    return f"multipart/form-data; boundary={boundary}"


def encode_file(
    local_path: str | os.PathLike[str],
    field_name: str = DEFAULT_FIELD_NAME,
    boundary: str | None = None,
) -> tuple[bytes, str]:
    """ローカルファイルを単一パートの multipart ボディにエンコードする。

    パートのファイル名にはローカルパスのベース名のみを使う。
    ファイルは読み終えた時点で閉じ、終端 boundary まで書き込んだ
    完成済みのボディを返す。

    Args:
        local_path: アップロードするローカルファイル
        field_name: フォームフィールド名
        boundary: 区切り文字列 (省略時はランダム生成)

    Returns:
        (ボディ, Content-Type) のタプル

    Raises:
        LocalIOError: ファイルを開けない・読めない場合
    """
    boundary = boundary or secrets.token_hex(16)
    filename = os.path.basename(os.fspath(local_path))
    buf = io.BytesIO()
    buf.write(f"--{boundary}\r\n".encode())
    buf.write(
        (
            f'Content-Disposition: form-data; name="{_quote(field_name)}"; '
            f'filename="{_quote(filename)}"\r\n'
        ).encode()
    )
    buf.write(b"Content-Type: application/octet-stream\r\n\r\n")
    try:
        with open(local_path, "rb") as f:
            while chunk := f.read(64 * 1024):
                buf.write(chunk)
    except OSError as e:
        raise LocalIOError(os.fspath(local_path), "Failed to read upload file", cause=e) from e
    buf.write(f"\r\n--{boundary}--\r\n".encode())
    return buf.getvalue(), content_type_for(boundary)
