"""Test cases for the option and validator records."""

from __future__ import annotations

import copy
import dataclasses
import pickle

import pytest

from confstack.core.dto import UNDEFINED, OptionSpec, ValidatorSpec, _Undefined, is_undefined


def test_undefined_is_singleton():
    """UNDEFINED はコピーしても同一オブジェクト"""
    assert _Undefined() is UNDEFINED
    assert copy.copy(UNDEFINED) is UNDEFINED
    assert copy.deepcopy({"a": UNDEFINED})["a"] is UNDEFINED
    assert pickle.loads(pickle.dumps(UNDEFINED)) is UNDEFINED


def test_undefined_is_falsy_and_distinct_from_none():
    """UNDEFINED は偽であり None とは区別される"""
    assert not UNDEFINED
    assert UNDEFINED is not None
    assert repr(UNDEFINED) == "UNDEFINED"
    assert is_undefined(UNDEFINED)
    assert not is_undefined(None)


def test_option_spec_defaults():
    """OptionSpec の既定値"""
    spec = OptionSpec(path="server.port")

    assert spec.flag is None
    assert spec.default_value is UNDEFINED
    assert spec.has_default is False
    assert spec.parser is None
    assert spec.validator is None
    assert spec.is_flag is False
    assert spec.description is None


def test_option_spec_none_default_is_defined():
    """None のデフォルト値は定義済み"""
    assert OptionSpec(path="a", default_value=None).has_default is True


def test_specs_are_immutable():
    """定義は生成後に変更できない"""
    spec = OptionSpec(path="a")
    validator_spec = ValidatorSpec(path="a", validator=lambda value, config: True)

    with pytest.raises(dataclasses.FrozenInstanceError):
        spec.path = "b"  # type: ignore[misc]
    with pytest.raises(dataclasses.FrozenInstanceError):
        validator_spec.message = "x"  # type: ignore[misc]
