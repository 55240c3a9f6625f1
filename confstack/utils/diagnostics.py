"""Diagnostic sinks backed by the standard logging module."""

from __future__ import annotations

import logging

DIAGNOSTIC_LOGGER_NAME = "confstack"


class LoggerSink:
    """診断メッセージをロガーへ出力するシンク

    Attributes:
        logger: 出力先ロガー
        level: 出力レベル（デフォルト: WARNING）
    """

    def __init__(self, logger: logging.Logger | None = None, level: int = logging.WARNING):
        self.logger = logger or logging.getLogger(DIAGNOSTIC_LOGGER_NAME)
        self.level = level

    def write(self, message: str) -> None:
        self.logger.log(self.level, message)


def default_sink() -> LoggerSink:
    return LoggerSink()
