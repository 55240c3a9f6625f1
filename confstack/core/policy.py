"""CLI引数の解釈挙動を束ねるポリシー定義。"""

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_RUNTIME_SUFFIXES: tuple[str, ...] = ("node", "node.exe")


@dataclass(frozen=True, slots=True)
class RuntimePrefixPolicy:
    """インタプリタ起動部分（実行ファイル + スクリプト）の読み飛ばし設定。

    先頭トークンが ``suffixes`` のいずれかで終わる場合のみ、
    先頭 ``prefix_length`` 個のトークンを読み飛ばす。
    """

    suffixes: tuple[str, ...] = DEFAULT_RUNTIME_SUFFIXES
    prefix_length: int = 2

    def start_index(self, args: list[str]) -> int:
        if args and args[0].endswith(self.suffixes):
            return self.prefix_length
        return 0
