"""ドット記法のパスによる設定ツリーの読み書き。

'server.port' のようなパスは常に '.' で分割した各セグメントとして解釈する。
キー内のドットのエスケープはサポートしない。
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import Any

from confstack.core.dto import UNDEFINED


def split_path(path: str) -> list[str]:
    return path.split(".")


def set_by_path(tree: MutableMapping[str, Any], path: str, value: Any) -> None:
    """パスの位置に値を書き込む

    途中のセグメントが存在しない、または辞書でない場合は空の辞書で置き換える。
    最後のセグメントは既存の値に関わらず上書きする。

    Args:
        tree: 書き込み先の設定ツリー
        path: ドット区切りのパス
        value: 書き込む値
    """
    parts = split_path(path)
    current = tree

    for part in parts[:-1]:
        if not isinstance(current.get(part), MutableMapping):
            current[part] = {}
        current = current[part]

    current[parts[-1]] = value


def get_by_path(tree: Mapping[str, Any], path: str) -> Any:
    """パスの位置の値を読み出す

    Args:
        tree: 読み出し元の設定ツリー
        path: ドット区切りのパス

    Returns:
        パスの値。途中が存在しない、None、または辞書でない場合は ``UNDEFINED``
    """
    current: Any = tree

    for part in split_path(path):
        if not isinstance(current, Mapping):
            return UNDEFINED
        current = current.get(part, UNDEFINED)

    return current
