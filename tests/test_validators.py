"""Test cases for the value validators."""

from __future__ import annotations

import re

from confstack import validators
from confstack.cli.pipeline import SKIP, OptionPipeline
from confstack.core.dto import OptionSpec


def test_file_exists(tmp_path):
    """ファイルの存在チェック"""
    existing = tmp_path / "exists.txt"
    existing.write_text("x", encoding="utf-8")
    missing = tmp_path / "missing.txt"

    assert validators.file_exists(str(existing)) is True
    assert validators.file_exists(str(missing)) == f"File not found: {missing}"


def test_file_exists_as_option_validator(tmp_path, recording_sink):
    """file_exists はそのままオプションのバリデータとして使える"""
    existing = tmp_path / "exists.txt"
    existing.write_text("x", encoding="utf-8")
    missing = tmp_path / "missing.txt"
    spec = OptionSpec(flag="--input", path="input", validator=validators.file_exists)
    pipeline = OptionPipeline(recording_sink)

    assert pipeline.process(str(existing), spec) == str(existing)
    assert pipeline.process(str(missing), spec) is SKIP
    assert recording_sink.messages == [f"Invalid value for --input: File not found: {missing}"]


def test_range():
    """範囲チェック（境界を含む）"""
    check = validators.range_(1, 100)

    assert check(50) is True
    assert check(1) is True
    assert check(100) is True
    assert check(0) == "Value must be between 1 and 100"
    assert check(101) == "Value must be between 1 and 100"


def test_range_non_comparable():
    """比較できない値は範囲外として扱う"""
    assert validators.range_(1, 10)("5") == "Value must be between 1 and 10"


def test_pattern_with_message():
    """正規表現とメッセージ"""
    check = validators.pattern(re.compile(r"^https?://.+", re.IGNORECASE), "Must be a valid URL")

    assert check("http://example.com") is True
    assert check("HTTPS://example.com") is True
    assert check("not-a-url") == "Must be a valid URL"


def test_pattern_default_message():
    """メッセージ未指定の場合はパターンを含む"""
    check = validators.pattern(r"^\d+$")

    assert check("123") is True
    assert check("abc") == r"Value must match pattern /^\d+$/"
    assert check(123) == r"Value must match pattern /^\d+$/"


def test_one_of():
    """許可された値のチェック"""
    check = validators.one_of(["red", "green", "blue"])

    assert check("red") is True
    assert check("yellow") == "Value must be one of: red, green, blue"


def test_one_of_custom_message():
    check = validators.one_of([1, 2], "Pick 1 or 2")

    assert check(2) is True
    assert check(3) == "Pick 1 or 2"


def test_min_length():
    """最小長のチェック"""
    check = validators.min_length(8)

    assert check("password123") is True
    assert check("12345678") is True
    assert check("short") == "Value must be at least 8 characters long"


def test_validators_table():
    """名前から参照できる"""
    assert validators.VALIDATORS["range"] is validators.range_
    assert set(validators.VALIDATORS) == {"file_exists", "range", "pattern", "one_of", "min_length"}
