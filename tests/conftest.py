"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Callable

PROJECT_ROOT = Path(__file__).resolve().parents[1]

if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import pytest

from confstack.adapters.fakes import RecordingSink


@pytest.fixture
def recording_sink() -> RecordingSink:
    """Return a sink that keeps every diagnostic message."""

    return RecordingSink()


@pytest.fixture
def tmp_config_file(tmp_path: Path) -> Callable[[Any], str]:
    """Return a factory writing a config.json file under tmp_path.

    Strings are written as-is, anything else is serialized as JSON.
    """

    def _write(content: Any, name: str = "config.json") -> str:
        config_path = tmp_path / name
        text = content if isinstance(content, str) else json.dumps(content)
        config_path.write_text(text, encoding="utf-8")
        return str(config_path)

    return _write
