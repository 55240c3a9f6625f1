"""CLIオプション値の parse → validate → assign 処理。"""

from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import TYPE_CHECKING, Any

from confstack.config.paths import set_by_path
from confstack.utils.diagnostics import default_sink

if TYPE_CHECKING:
    from confstack.core.dto import OptionSpec
    from confstack.core.interfaces import DiagnosticSink

logger = logging.getLogger(__name__)


class _Skip:
    def __repr__(self) -> str:
        return "SKIP"


SKIP: Any = _Skip()


class OptionPipeline:
    """1つのオプション値を変換・検証して設定ツリーへ書き込む

    変換・検証の失敗は診断シンクへ報告し、そのオプションは書き込まない。
    失敗しても残りの引数の処理は継続する。
    """

    def __init__(self, sink: DiagnosticSink | None = None):
        self.sink = sink if sink is not None else default_sink()

    def process(self, raw_value: str, spec: OptionSpec) -> Any:
        """生の文字列を変換・検証する

        Args:
            raw_value: CLIから受け取った文字列
            spec: 対象オプションの定義

        Returns:
            受理された値。拒否された場合は ``SKIP``
        """
        value: Any = raw_value

        if spec.parser is not None:
            try:
                value = spec.parser(raw_value)
            except Exception as e:
                self.sink.write(f"Error parsing value for {spec.flag}: {e}")
                return SKIP

        if spec.validator is not None:
            try:
                result = spec.validator(value)
            except Exception as e:
                self.sink.write(f"Invalid value for {spec.flag}: {e}")
                return SKIP

            if isinstance(result, str):
                self.sink.write(f"Invalid value for {spec.flag}: {result}")
                return SKIP
            if result is False:
                self.sink.write(f"Invalid value for {spec.flag}")
                return SKIP

        return value

    def apply(self, raw_value: str, spec: OptionSpec, tree: MutableMapping[str, Any]) -> bool:
        """値を処理し、受理された場合は spec.path へ書き込む。"""
        value = self.process(raw_value, spec)
        if value is SKIP:
            return False

        set_by_path(tree, spec.path, value)
        logger.debug(f"CLIオプションを適用しました: {spec.flag} -> {spec.path}")
        return True
