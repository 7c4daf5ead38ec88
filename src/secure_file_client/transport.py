"""Secure file API 用 HTTP トランスポート"""

from __future__ import annotations

from typing import Protocol

import httpx

from .models import SecureFileConfig


class Transport(Protocol):
    """Secure file API へリクエストを送るトランスポート。

    返すレスポンスはボディ未読のストリームで、呼び出し側が close する。
    認証ヘッダー・リトライ・リダイレクトはトランスポート側の責務。
    """

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response: ...

    def request_with_body(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None,
        content_type: str,
        body: bytes,
    ) -> httpx.Response: ...


class HttpxTransport:
    """httpx.Client を使ったデフォルトのトランスポート実装。"""

    def __init__(self, config: SecureFileConfig, client: httpx.Client | None = None) -> None:
        self._config = config
        self._client = client or httpx.Client(
            base_url=config.server_url,
            headers=config.headers,
            timeout=config.timeout_seconds,
        )

    def __enter__(self) -> HttpxTransport:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        """内部の接続プールを閉じる。"""
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
    ) -> httpx.Response:
        req = self._client.build_request(method, path, params=params)
        return self._client.send(req, stream=True)

    def request_with_body(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None,
        content_type: str,
        body: bytes,
    ) -> httpx.Response:
        req = self._client.build_request(
            method,
            path,
            params=params,
            content=body,
            headers={"Content-Type": content_type},
        )
        return self._client.send(req, stream=True)
