"""SecureFileClient 抽象基底クラス"""

from __future__ import annotations

import os
from abc import ABC, abstractmethod
from pathlib import Path

from .models import SecureFilesResponse


class SecureFileClient(ABC):
    """Secure file クライアント抽象基底クラス。"""

    @abstractmethod
    def list(self, root_path: str = "") -> SecureFilesResponse:
        """root_path 配下の secure file 一覧を取得する。空文字列なら全件。"""
        ...

    @abstractmethod
    def get(self, remote_path: str, local_dir: str | os.PathLike[str]) -> Path:
        """secure file を local_dir にダウンロードし、保存先パスを返す。"""
        ...

    @abstractmethod
    def put(self, remote_path: str, local_path: str | os.PathLike[str]) -> None:
        """ローカルファイルを remote_path にアップロードする。"""
        ...
