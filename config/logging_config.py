#=========== config/logging_config.py

import logging
import os
import sys
from datetime import datetime
from typing import Optional

LOG_LEVEL_ENV = "TAX_PRORATION_LOG_LEVEL"
ROOT_LOGGER_NAMES = ("config", "core", "ui")


class StructuredFormatter(logging.Formatter):
    """
    [時刻] [レベル] [モジュール:関数:行] メッセージ
    """

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime("%Y-%m-%d %H:%M:%S.%f")[:-3]
        location = f"{record.module}:{record.funcName}:{record.lineno}"
        msg = f"[{timestamp}] [{record.levelname:8s}] [{location}] {record.getMessage()}"

        if record.exc_info:
            msg += f"\n{self.formatException(record.exc_info)}"
        return msg


def setup_logging(level: Optional[str] = None) -> None:
    """
    パッケージ（config / core / ui）のロガーに標準出力ハンドラを1つだけ付ける。
    level 省略時は環境変数 TAX_PRORATION_LOG_LEVEL、無ければ WARNING。
    Streamlit の再実行で何度呼ばれてもハンドラは重複しない。
    """
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV, "WARNING")
    log_level = getattr(logging, level.upper(), logging.WARNING)

    for name in ROOT_LOGGER_NAMES:
        logger = logging.getLogger(name)
        logger.setLevel(log_level)

        if logger.handlers:
            for handler in logger.handlers:
                handler.setLevel(log_level)
            continue

        handler = logging.StreamHandler(sys.stdout)
        handler.setLevel(log_level)
        handler.setFormatter(StructuredFormatter())
        logger.addHandler(handler)
        logger.propagate = False

#=========== end logging_config.py
