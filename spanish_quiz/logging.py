"""
logging.py
======================

structlog の初期化と logger 取得。

- レベルと出力形式は AppConfig (config.toml [logging] / QUIZ_LOG_LEVEL) から決める
- すべてのログに app="spanish_quiz" とモジュール名 (logger) を付ける
- requests 配下の urllib3 は DEBUG 以外では WARNING 以上だけ出す

アプリ起動時に configure_logging() を 1 回だけ呼ぶ。
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

import structlog

if TYPE_CHECKING:
    from .config import AppConfig

APP_NAME = "spanish_quiz"
NOISY_LOGGERS = ("urllib3",)


def _add_app_name(_logger, _method_name, event_dict):
    event_dict.setdefault("app", APP_NAME)
    return event_dict


def configure_logging(config: "AppConfig") -> None:
    """
    AppConfig のログ設定で標準 logging と structlog を初期化する。
    log_json=True なら JSON、そうでなければ開発用のコンソール出力。
    """
    log_level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(level=log_level)
    logging.getLogger().setLevel(log_level)

    noisy_level = log_level if log_level <= logging.DEBUG else logging.WARNING
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(noisy_level)

    processors = [
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        _add_app_name,
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
    ]
    if config.log_json:
        processors.append(structlog.processors.JSONRenderer(ensure_ascii=False))
    else:
        processors.append(structlog.dev.ConsoleRenderer())

    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(log_level),
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
    )


def get_logger(name: Optional[str] = None):
    return structlog.get_logger(name or APP_NAME)
