"""設定定義で扱うDTO。

CLIオプションと検証ルールを宣言的に保持する薄いデータコンテナ。
値の「未定義」は JSON の null (None) と区別するため ``UNDEFINED`` で表す。
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from confstack.core.interfaces import ConfigValidator, OptionValidator, Parser


class _Undefined:
    """値が存在しないことを表すシングルトン。"""

    _instance: _Undefined | None = None

    def __new__(cls) -> _Undefined:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> _Undefined:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> _Undefined:
        return self

    def __reduce__(self) -> str:
        return "UNDEFINED"


UNDEFINED: Any = _Undefined()


def is_undefined(value: Any) -> bool:
    """値が ``UNDEFINED`` かどうかを判定する。"""
    return value is UNDEFINED


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """1つの設定項目のDTO。

    Attributes:
        path: 値を格納するドット区切りパス（例: 'server.port'）
        flag: CLIフラグ（例: '--port'）。未指定の場合はCLIから設定できない
        default_value: デフォルト値。``UNDEFINED`` の場合はデフォルトなし
        parser: 文字列を値へ変換する関数
        validator: 値を検証する関数（True / False / エラーメッセージ）
        is_flag: 値を取らないブールフラグの場合True
        description: ヘルプテキスト用の説明
    """

    path: str
    flag: str | None = None
    default_value: Any = UNDEFINED
    parser: Parser | None = None
    validator: OptionValidator | None = None
    is_flag: bool = False
    description: str | None = None

    @property
    def has_default(self) -> bool:
        return self.default_value is not UNDEFINED


@dataclass(frozen=True, slots=True)
class ValidatorSpec:
    """設定全体に対する検証ルールのDTO。

    Attributes:
        path: 検証対象の値のパス
        validator: (値, 設定全体) を受け取り True / False / メッセージを返す関数
        message: validator が False を返した場合のエラーメッセージ
    """

    path: str
    validator: ConfigValidator
    message: str = ""
