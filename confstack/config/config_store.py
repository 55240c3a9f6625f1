"""Layered configuration store for confstack."""

from __future__ import annotations

import copy
import json
import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING, Any

from confstack.cli.tokenizer import parse_cli_args
from confstack.config.loader import LocalFileSource, load_config_file
from confstack.config.merging import deep_merge, merge_layers
from confstack.config.paths import get_by_path, set_by_path
from confstack.core.dto import UNDEFINED
from confstack.core.errors import ValidationError
from confstack.utils.diagnostics import default_sink

if TYPE_CHECKING:
    from confstack.core.dto import OptionSpec, ValidatorSpec
    from confstack.core.interfaces import DiagnosticSink, FileSource
    from confstack.core.policy import RuntimePrefixPolicy

logger = logging.getLogger(__name__)

HELP_HEADER = "Available configuration options:\n\n"


class ConfigStore:
    """設定管理クラス

    デフォルト値・JSON設定ファイル・明示的な設定・CLI引数の4つのレイヤーを
    この順に深いマージで統合し、ドット記法で設定値を提供する。

    Attributes:
        config_file_path: 設定ファイルのパス
        options: オプション定義
        validators: 設定全体の検証ルール
        auto_validate: get() 時に自動で検証する場合True
        config: 統合された設定データ

    Example:
        >>> store = ConfigStore(
        ...     options=[OptionSpec(path="server.port", flag="--port", default_value=3000, parser=parsers.int_)],
        ...     args=["--port", "8080"],
        ... )
        >>> store.get_value("server.port")
        8080
    """

    def __init__(
        self,
        config_file_path: str | None = None,
        args: Sequence[str] | None = None,
        config: Mapping[str, Any] | None = None,
        options: Sequence[OptionSpec] | None = None,
        validators: Sequence[ValidatorSpec] | None = None,
        auto_validate: bool = True,
        sink: DiagnosticSink | None = None,
        file_source: FileSource | None = None,
        policy: RuntimePrefixPolicy | None = None,
    ):
        """ConfigStoreを初期化する

        Args:
            config_file_path: JSON設定ファイルのパス（存在しない場合は無視）
            args: CLIトークン列（通常は sys.argv）
            config: 明示的な設定（ファイルより優先、CLIより劣後）
            options: オプション定義
            validators: 設定全体の検証ルール
            auto_validate: get() 時に自動で検証する場合True
            sink: 診断メッセージの出力先（デフォルト: 'confstack' ロガー）
            file_source: 設定ファイル取得ポート（デフォルト: ローカルファイル）
            policy: CLI先頭トークンの読み飛ばし設定
        """
        self.config_file_path = config_file_path
        self.options: list[OptionSpec] = list(options or [])
        self.validators: list[ValidatorSpec] = list(validators or [])
        self.auto_validate = auto_validate
        self.sink = sink if sink is not None else default_sink()
        self.file_source = file_source if file_source is not None else LocalFileSource()
        self.policy = policy

        self.config = self._create_config(list(args or []), config or {})

    def _build_defaults(self) -> dict[str, Any]:
        defaults: dict[str, Any] = {}
        for option in self.options:
            if option.has_default:
                set_by_path(defaults, option.path, copy.deepcopy(option.default_value))
        return defaults

    def _create_config(self, args: list[str], configuration: Mapping[str, Any]) -> dict[str, Any]:
        """デフォルト → ファイル → 明示的な設定 → CLI の順に統合する。"""
        defaults = self._build_defaults()
        file_config = load_config_file(self.config_file_path, self.file_source, self.sink)
        cli_config = parse_cli_args(args, self.options, sink=self.sink, policy=self.policy)

        return merge_layers([defaults, file_config, configuration, cli_config])

    def validate(self) -> None:
        """設定値の妥当性を検証する

        検証ルールを宣言順に評価し、最初に失敗したルールで例外を送出する。

        Raises:
            ValidationError: validator が False またはメッセージ文字列を返した場合
        """
        for spec in self.validators:
            value = get_by_path(self.config, spec.path)
            result = spec.validator(value, self.config)

            if result is False:
                raise ValidationError(spec.message)
            if isinstance(result, str):
                raise ValidationError(result)

    def get(self) -> dict[str, Any]:
        """統合された設定全体を取得する

        Raises:
            ValidationError: auto_validate が有効で検証に失敗した場合
        """
        if self.auto_validate:
            self.validate()
        return self.config

    def get_value(self, path: str, default: Any = None) -> Any:
        """設定値を取得する

        Args:
            path: 設定キー（ドット記法をサポート）
            default: キーが存在しない場合のデフォルト値

        Returns:
            設定値、またはデフォルト値（None は定義済みの値として返す）
        """
        value = get_by_path(self.config, path)
        return default if value is UNDEFINED else value

    def set_value(self, path: str, value: Any) -> None:
        """設定値を動的に変更する

        辞書の場合は現在の値と深いマージを行い、それ以外は上書きする。

        Args:
            path: 設定キー（ドット記法をサポート）
            value: 設定する値
        """
        if isinstance(value, Mapping):
            current = get_by_path(self.config, path)
            if current is UNDEFINED or current is None:
                current = {}
            if isinstance(current, Mapping):
                set_by_path(self.config, path, deep_merge(current, value))
                logger.debug(f"設定値をマージしました: {path}")
                return

        set_by_path(self.config, path, value)
        logger.debug(f"設定値を変更しました: {path} = {value!r}")

    def get_help_text(self) -> str:
        """オプション定義からヘルプテキストを生成する。"""
        lines = [HELP_HEADER]

        for option in self.options:
            if option.flag is None:
                continue

            lines.append(f"{option.flag}{'' if option.is_flag else ' <value>'}\n")
            if option.description:
                lines.append(f"  {option.description}\n")
            if option.has_default:
                lines.append(f"  Default: {json.dumps(option.default_value, default=str)}\n")
            lines.append("\n")

        return "".join(lines)
