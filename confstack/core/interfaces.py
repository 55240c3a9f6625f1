"""ポートインターフェース定義。

パーサ・バリデータ・ファイル読み込み・診断出力はここで定義されるProtocolに依存し、
具体実装は関数・クロージャ・オブジェクトのいずれでも差し替えられる。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, Union

if TYPE_CHECKING:
    from collections.abc import Mapping

ValidationResult = Union[bool, str]


class Parser(Protocol):
    """CLIの生文字列を値へ変換するポート。"""

    def __call__(self, value: str) -> Any:
        """変換できない場合は例外を送出する。"""


class OptionValidator(Protocol):
    """単一オプション値の検証ポート。"""

    def __call__(self, value: Any) -> ValidationResult:
        """True で受理、False またはメッセージ文字列で拒否する。"""


class ConfigValidator(Protocol):
    """設定全体を参照できる検証ポート。"""

    def __call__(self, value: Any, config: Mapping[str, Any]) -> ValidationResult:
        """True で受理、False またはメッセージ文字列で拒否する。"""


class FileSource(Protocol):
    """設定ファイル取得ポート。"""

    def read_text(self, path: str) -> str | None:
        """UTF-8テキストを返す。ファイルが存在しない場合は None を返す。"""


class DiagnosticSink(Protocol):
    """致命的でない警告・エラーの出力先ポート。"""

    def write(self, message: str) -> None:
        """1行のメッセージを出力する。"""
