"""設定ツリーの深いマージ。"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any

from confstack.core.dto import UNDEFINED


def deep_merge(target: Mapping[str, Any], source: Mapping[str, Any]) -> dict[str, Any]:
    """source の値で target を上書きした新しい辞書を返す

    - source の値が ``UNDEFINED`` のキーは無視する
    - 両方の値が辞書の場合は再帰的にマージする
    - それ以外（リスト、スカラー、None、型の不一致）は source の値で置き換える

    トップレベルは浅いコピーを返し、入力は変更しない。
    変更されなかった入れ子の辞書は複製せずにそのまま共有する。

    Args:
        target: マージ先の設定
        source: 優先される設定

    Returns:
        マージ済みの設定
    """
    result = dict(target)

    for key, value in source.items():
        if value is UNDEFINED:
            continue

        current = result.get(key, UNDEFINED)
        if isinstance(value, Mapping) and isinstance(current, Mapping):
            result[key] = deep_merge(current, value)
        else:
            result[key] = value

    return result


def merge_layers(layers: Iterable[Mapping[str, Any]]) -> dict[str, Any]:
    """優先度の低い順に並んだ設定レイヤーを順番にマージする。"""
    merged: dict[str, Any] = {}
    for layer in layers:
        merged = deep_merge(merged, layer)
    return merged
