"""Secure file のトランスポート実装クライアント"""

from __future__ import annotations

import contextlib
import os
import posixpath
from pathlib import Path
from typing import Any

import httpx

from .client import SecureFileClient
from .disposition import parse_filename
from .exceptions import (
    LocalIOError,
    MalformedResponseError,
    SecureFileError,
    TransportError,
    UnexpectedStatusError,
)
from .logger import get_logger
from .models import SecureFileConfig, SecureFilesResponse
from .multipart import encode_file
from .transport import HttpxTransport, Transport

logger = get_logger(__name__)


def join_path(base: str, sub: str) -> str:
    """base に sub を連結し、POSIX パスとして正規化する。"""
    if not sub:
        return posixpath.normpath(base)
    return posixpath.normpath(posixpath.join(base, sub.lstrip("/")))


class SecureFileTransfer(SecureFileClient):
    """注入されたトランスポート上で secure file の一覧・取得・登録を行う。

    各メソッドはステートレスで 1 回のリクエストだけを送る。
    リトライはしないので、必要なら呼び出し側で行う。
    """

    def __init__(self, transport: Transport, config: SecureFileConfig) -> None:
        self._transport = transport
        self._config = config

    @classmethod
    def from_config(cls, config: SecureFileConfig) -> SecureFileTransfer:
        """HttpxTransport を使うクライアントを生成する。"""
        return cls(HttpxTransport(config), config)

    @property
    def config(self) -> SecureFileConfig:
        return self._config

    def _send(
        self,
        method: str,
        path: str,
        content_type: str | None = None,
        body: bytes | None = None,
    ) -> httpx.Response:
        params: dict[str, str] = {}
        try:
            if body is None:
                return self._transport.request(method, path, params)
            return self._transport.request_with_body(
                method, path, params, content_type or "", body
            )
        except SecureFileError:
            raise
        except Exception as e:
            raise TransportError(f"{method} {path} failed: {e}", cause=e) from e

    def list(self, root_path: str = "") -> SecureFilesResponse:
        """secure file 一覧を取得する。

        Raises:
            TransportError: リクエストが送れない・ボディが読めない場合
            UnexpectedStatusError: ステータスが 200 以外の場合
            MalformedResponseError: ボディをデコードできない場合
        """
        path = join_path(self._config.list_base_path, root_path)
        try:
            resp = self._send("GET", path)
            try:
                if resp.status_code != httpx.codes.OK:
                    raise UnexpectedStatusError(
                        resp.status_code, path, "error while trying to list secure files"
                    )
                data = self._read_json(resp)
            finally:
                resp.close()
            try:
                result = SecureFilesResponse.from_dict(data)
            except (KeyError, TypeError, ValueError, AttributeError) as e:
                raise MalformedResponseError(
                    f"error decoding secure file list: {e}", cause=e
                ) from e
        except SecureFileError as e:
            logger.warning("secure file list failed", path=path, error=str(e))
            raise
        logger.debug(
            "secure files listed",
            path=path,
            result_count=result.result_count,
            has_next=result.has_next,
        )
        return result

    def get(self, remote_path: str, local_dir: str | os.PathLike[str]) -> Path:
        """secure file をダウンロードする。

        保存ファイル名はレスポンスの Content-Disposition の filename で決まり、
        remote_path はリソースの指定にのみ使う。

        Raises:
            TransportError: リクエストが送れない・ボディ受信中に失敗した場合
            UnexpectedStatusError: ステータスが 200 以外の場合
            MalformedResponseError: filename を取得できない場合
            LocalIOError: 保存先ファイルを作成・書き込みできない場合
        """
        path = join_path(self._config.file_base_path, remote_path)
        try:
            resp = self._send("GET", path)
            try:
                if resp.status_code != httpx.codes.OK:
                    raise UnexpectedStatusError(
                        resp.status_code,
                        remote_path,
                        "error while trying to download secure file",
                    )
                filename = parse_filename(resp.headers.get("Content-Disposition"))
                target = Path(local_dir) / filename
                size = self._write_body(resp, target)
            finally:
                resp.close()
        except SecureFileError as e:
            logger.warning("secure file download failed", remote_path=remote_path, error=str(e))
            raise
        logger.debug(
            "secure file downloaded",
            remote_path=remote_path,
            local_file=str(target),
            size_in_bytes=size,
        )
        return target

    def put(self, remote_path: str, local_path: str | os.PathLike[str]) -> None:
        """ローカルファイルをアップロードする。成功は 204 のみ。

        Raises:
            LocalIOError: ローカルファイルを読めない場合 (送信前に発生)
            TransportError: リクエストが送れない場合
            UnexpectedStatusError: ステータスが 204 以外の場合
        """
        path = join_path(self._config.file_base_path, remote_path)
        try:
            body, content_type = encode_file(local_path)
            resp = self._send("POST", path, content_type, body)
            try:
                if resp.status_code != httpx.codes.NO_CONTENT:
                    raise UnexpectedStatusError(
                        resp.status_code,
                        remote_path,
                        "error while trying to upload secure file",
                    )
            finally:
                resp.close()
        except SecureFileError as e:
            logger.warning("secure file upload failed", remote_path=remote_path, error=str(e))
            raise
        logger.debug(
            "secure file uploaded",
            remote_path=remote_path,
            local_file=os.fspath(local_path),
            body_size=len(body),
        )

    def _read_json(self, resp: httpx.Response) -> Any:
        try:
            resp.read()
        except httpx.HTTPError as e:
            raise TransportError(f"error reading response body: {e}", cause=e) from e
        try:
            return resp.json()
        except ValueError as e:
            raise MalformedResponseError(f"error decoding response body: {e}", cause=e) from e

    def _write_body(self, resp: httpx.Response, target: Path) -> int:
        try:
            out = open(target, "wb")
        except OSError as e:
            raise LocalIOError(str(target), "error creating local file", cause=e) from e
        size = 0
        try:
            with out:
                for chunk in resp.iter_bytes(self._config.chunk_size):
                    out.write(chunk)
                    size += len(chunk)
        except httpx.HTTPError as e:
            self._remove_partial(target)
            raise TransportError(f"error receiving secure file: {e}", cause=e) from e
        except OSError as e:
            self._remove_partial(target)
            raise LocalIOError(str(target), "error writing local file", cause=e) from e
        return size

    @staticmethod
    def _remove_partial(target: Path) -> None:
        with contextlib.suppress(OSError):
            target.unlink(missing_ok=True)
