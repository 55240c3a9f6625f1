"""Common validators for config values.

``file_exists`` is an ``OptionSpec.validator`` as is; the other functions are
factories that build one. A validator yields ``True`` for an accepted value and
an error message string otherwise.
"""

from __future__ import annotations

import re
from collections.abc import Callable, Sequence
from pathlib import Path
from typing import Any, Union

ValidatorFn = Callable[[Any], Union[bool, str]]


def file_exists(path: str) -> bool | str:
    """ファイルが存在することを検証する。"""
    return Path(path).exists() or f"File not found: {path}"


def range_(minimum: float, maximum: float) -> ValidatorFn:
    """値が [minimum, maximum] の範囲内であることを検証する。"""

    def validate(value: float) -> bool | str:
        try:
            in_range = minimum <= value <= maximum
        except TypeError:
            in_range = False
        return in_range or f"Value must be between {minimum} and {maximum}"

    return validate


def pattern(regex: str | re.Pattern[str], message: str | None = None) -> ValidatorFn:
    """文字列が正規表現に一致することを検証する

    Args:
        regex: 正規表現（文字列またはコンパイル済みパターン）
        message: 不一致時のメッセージ（デフォルト: 'Value must match pattern /<regex>/'）
    """
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def validate(value: str) -> bool | str:
        matched = isinstance(value, str) and compiled.search(value) is not None
        return matched or message or f"Value must match pattern /{compiled.pattern}/"

    return validate


def one_of(allowed_values: Sequence[Any], message: str | None = None) -> ValidatorFn:
    """値が許可された値のいずれかであることを検証する。"""
    allowed = list(allowed_values)

    def validate(value: Any) -> bool | str:
        return value in allowed or message or f"Value must be one of: {', '.join(str(v) for v in allowed)}"

    return validate


def min_length(minimum: int) -> ValidatorFn:
    def validate(value: str) -> bool | str:
        return len(value) >= minimum or f"Value must be at least {minimum} characters long"

    return validate


VALIDATORS = {
    "file_exists": file_exists,
    "range": range_,
    "pattern": pattern,
    "one_of": one_of,
    "min_length": min_length,
}
