"""Content-Disposition ヘッダーからのファイル名取得"""

from __future__ import annotations

import posixpath
from email.headerregistry import HeaderRegistry

from .exceptions import MalformedResponseError

_registry = HeaderRegistry()


def parse_filename(value: str | None) -> str:
    """Content-Disposition の値から filename パラメータを取り出す。

    保存先ファイル名はサーバーが決めるため、フォールバックは持たない。
    ディレクトリ成分を含む名前も拒否する。

    Raises:
        MalformedResponseError: ヘッダーが無い・壊れている・filename が無い場合
    """
    if not value:
        raise MalformedResponseError("no Content-Disposition header in secure file response")
    header = _registry("content-disposition", value)
    if header.defects or not header.content_disposition:
        raise MalformedResponseError(f"error parsing secure file header: {value!r}")
    filename = header.params.get("filename")
    if not filename:
        raise MalformedResponseError("no filename present in secure file header")
    if (
        filename in (".", "..")
        or "\\" in filename
        or "\x00" in filename
        or posixpath.basename(filename) != filename
    ):
        raise MalformedResponseError(f"invalid filename in secure file header: {filename!r}")
    return str(filename)
