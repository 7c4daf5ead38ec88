"""structlog ベースのライブラリ用ロガー"""

from __future__ import annotations

import logging

import structlog

PACKAGE_LOGGER_NAME = "secure_file_client"

# ホスト側で logging 未設定の場合に lastResort (stderr) へ出さない
logging.getLogger(PACKAGE_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """stdlib の logging に出力する structlog ロガーを返す。

    ライブラリ側では structlog.configure() を呼ばない。出力先とレベルは
    利用側アプリケーションの logging 設定に従う。

    Args:
        name: stdlib ロガー名 (通常は __name__)

    Returns:
        structlog.stdlib.BoundLogger
    """
    processors: list[structlog.types.Processor] = [
        structlog.stdlib.filter_by_level,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.render_to_log_kwargs,
    ]
    logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
        logging.getLogger(name),
        processors=processors,
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
    )
    return logger
