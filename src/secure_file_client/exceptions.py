"""secure_file_client ライブラリの例外型定義"""

from __future__ import annotations


class SecureFileErrorCodes:
    """SecureFileError のエラーコード定数。"""

    TRANSPORT_ERROR: str = "TRANSPORT_ERROR"
    UNEXPECTED_STATUS: str = "UNEXPECTED_STATUS"
    MALFORMED_RESPONSE: str = "MALFORMED_RESPONSE"
    LOCAL_IO_ERROR: str = "LOCAL_IO_ERROR"


class SecureFileError(Exception):
    """secure_file_client ライブラリのエラー基底クラス。"""

    def __init__(
        self,
        code: str,
        message: str,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.code = code
        if cause is not None:
            self.__cause__ = cause

    def __str__(self) -> str:
        return f"{self.code}: {super().__str__()}"


class TransportError(SecureFileError):
    """トランスポート層 (接続・送受信) の失敗。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(SecureFileErrorCodes.TRANSPORT_ERROR, message, cause)


class UnexpectedStatusError(SecureFileError):
    """期待した成功ステータス以外のレスポンスを受け取った。"""

    def __init__(self, status_code: int, path: str, message: str) -> None:
        self.status_code = status_code
        self.path = path
        super().__init__(
            SecureFileErrorCodes.UNEXPECTED_STATUS,
            f"{message}: HTTP {status_code} ({path})",
        )


class MalformedResponseError(SecureFileError):
    """レスポンスのボディまたはヘッダーを解釈できない。"""

    def __init__(self, message: str, cause: Exception | None = None) -> None:
        super().__init__(SecureFileErrorCodes.MALFORMED_RESPONSE, message, cause)


class LocalIOError(SecureFileError):
    """ローカルファイルの読み書きに失敗した。"""

    def __init__(self, path: str, message: str, cause: Exception | None = None) -> None:
        self.path = path
        super().__init__(SecureFileErrorCodes.LOCAL_IO_ERROR, f"{message}: {path}", cause)
