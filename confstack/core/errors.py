"""設定処理で送出される例外。"""

from __future__ import annotations

DEFAULT_VALIDATION_MESSAGE = "Validation did not pass"


class ConfigError(Exception):
    """confstack の例外の基底クラス。"""


class ValidationError(ConfigError, ValueError):
    """設定の検証に失敗した場合の例外。

    クライアント入力起因のエラーとして ``status_code`` に 400 を持つ。
    """

    status_code = 400

    def __init__(self, message: str = "") -> None:
        self.message = message or DEFAULT_VALIDATION_MESSAGE
        super().__init__(self.message)


class ConfigFileError(ConfigError):
    """設定ファイルの読み込み・解析に失敗した場合の例外。"""

    def __init__(self, path: str, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(reason)
