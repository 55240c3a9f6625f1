"""Logging utilities for confstack command-line tools."""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
LOG_FILE_NAME = 'confstack.log'


def setup_logging(
    debug_mode: bool = False, log_dir: Optional[str] = None, stream: Optional[TextIO] = None
) -> None:
    """ロギングを設定する

    Args:
        debug_mode: デバッグモードの場合True
        log_dir: ログファイルの出力ディレクトリ（指定しない場合はコンソールのみ）
        stream: コンソール出力先（デフォルト: sys.stdout）
    """
    log_level = logging.DEBUG if debug_mode else logging.INFO

    # 既存のハンドラをクリア
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    # コンソール出力
    console_handler = logging.StreamHandler(stream or sys.stdout)
    console_handler.setLevel(log_level)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(console_handler)

    # ファイル出力
    if log_dir is not None:
        log_path = Path(log_dir)
        log_path.mkdir(exist_ok=True, parents=True)

        file_handler = logging.FileHandler(log_path / LOG_FILE_NAME, encoding='utf-8')
        file_handler.setLevel(log_level)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        root_logger.addHandler(file_handler)

    root_logger.setLevel(log_level)
