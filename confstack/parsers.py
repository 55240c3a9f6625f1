"""Common parsers for CLI option values.

Each parser takes the raw command-line string and returns the converted value,
raising ``ValueError`` when the string cannot be converted.
"""

from __future__ import annotations

import json
import math
import re
from typing import Any

_INT_PATTERN = re.compile(r"^[+-]?\d+$")
_FLOAT_PATTERN = re.compile(r"^[+-]?(?:\d+(?:\.\d*)?|\.\d+)(?:[eE][+-]?\d+)?$")

TRUE_VALUES = frozenset({"true", "yes", "1", "y"})
FALSE_VALUES = frozenset({"false", "no", "0", "n"})


def int_(value: str) -> int:
    """文字列を整数に変換する。"""
    trimmed = value.strip()
    if not _INT_PATTERN.match(trimmed):
        raise ValueError(f'Cannot parse "{value}" as an integer')
    return int(trimmed)


def float_(value: str) -> float:
    """文字列を浮動小数点数に変換する（指数表記と Infinity を含む）。"""
    trimmed = value.strip()
    if not _FLOAT_PATTERN.match(trimmed):
        if trimmed == "Infinity":
            return math.inf
        if trimmed == "-Infinity":
            return -math.inf
        raise ValueError(f'Cannot parse "{value}" as a number')
    return float(trimmed)


def boolean(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    raise ValueError(f'Cannot parse "{value}" as a boolean')


def array(value: str) -> list[str]:
    """カンマ区切りの文字列をリストに変換する。"""
    return [item.strip() for item in value.split(",")]


def json_(value: str) -> Any:
    try:
        return json.loads(value)
    except json.JSONDecodeError as e:
        raise ValueError(f'Cannot parse "{value}" as JSON') from e


PARSERS = {
    "int": int_,
    "float": float_,
    "boolean": boolean,
    "array": array,
    "json": json_,
}
