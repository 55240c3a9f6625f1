"""設定ファイルの読み込み専用モジュール。"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any

from confstack.core.errors import ConfigFileError

if TYPE_CHECKING:
    from confstack.core.interfaces import DiagnosticSink, FileSource

logger = logging.getLogger(__name__)

FILE_ERROR_PREFIX = "Error reading config file"


class LocalFileSource:
    """ローカルファイルシステムから設定ファイルを読み込む。"""

    def read_text(self, path: str) -> str | None:
        config_path = Path(path)
        if not config_path.exists():
            return None
        return config_path.read_text(encoding="utf-8")


def parse_config_text(text: str, path: str = "<string>") -> dict[str, Any]:
    """JSON設定を辞書として解析する。"""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as e:
        raise ConfigFileError(path, str(e)) from e

    if not isinstance(data, dict):
        raise ConfigFileError(path, f"JSON設定は辞書形式である必要があります: {type(data).__name__}")
    return data


def load_config_file(path: str | None, source: FileSource, sink: DiagnosticSink) -> dict[str, Any]:
    """設定ファイルを読み込む

    ファイルが存在しない場合や読み込み・解析に失敗した場合は空の辞書を返す。
    失敗は診断シンクへ1度だけ報告し、例外は送出しない。

    Args:
        path: 設定ファイルのパス（None の場合は読み込まない）
        source: ファイル取得ポート
        sink: 診断メッセージの出力先

    Returns:
        読み込まれた設定データ
    """
    if not path:
        return {}

    try:
        text = source.read_text(path)
        if text is None:
            logger.debug(f"設定ファイル '{path}' が見つかりません。")
            return {}
        data = parse_config_text(text, path)
    except (OSError, UnicodeDecodeError, ConfigFileError) as e:
        sink.write(f"{FILE_ERROR_PREFIX}: {e}")
        return {}

    logger.info(f"Loaded configuration from {path}")
    return data
