"""テスト向けの軽量な Fake 実装群。"""

from __future__ import annotations

from typing import TYPE_CHECKING

from confstack.core.interfaces import DiagnosticSink, FileSource

if TYPE_CHECKING:
    from collections.abc import Mapping


class RecordingSink(DiagnosticSink):
    """出力されたメッセージをリストに保持するシンク。"""

    def __init__(self) -> None:
        self.messages: list[str] = []

    def write(self, message: str) -> None:
        self.messages.append(message)

    def contains(self, text: str) -> bool:
        return any(text in message for message in self.messages)


class InMemoryFileSource(FileSource):
    """辞書で与えたパスと内容からファイルを返す。"""

    def __init__(self, files: Mapping[str, str] | None = None, error: Exception | None = None):
        self.files = dict(files or {})
        self.error = error
        self.requested: list[str] = []

    def read_text(self, path: str) -> str | None:
        self.requested.append(path)
        if self.error is not None:
            raise self.error
        return self.files.get(path)
