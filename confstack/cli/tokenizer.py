"""CLIトークン列を設定ツリーへ変換する。"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from confstack.cli.pipeline import OptionPipeline
from confstack.config.paths import set_by_path
from confstack.core.policy import RuntimePrefixPolicy
from confstack.utils.diagnostics import default_sink

if TYPE_CHECKING:
    from confstack.core.dto import OptionSpec
    from confstack.core.interfaces import DiagnosticSink


def find_option(flag: str, options: Sequence[OptionSpec]) -> OptionSpec | None:
    """flag に一致する最初のオプション定義を返す。"""
    for option in options:
        if option.flag is not None and option.flag == flag:
            return option
    return None


def parse_cli_args(
    args: Sequence[str],
    options: Sequence[OptionSpec],
    sink: DiagnosticSink | None = None,
    policy: RuntimePrefixPolicy | None = None,
) -> dict[str, Any]:
    """CLIトークン列をオプション定義に従って設定ツリーへ変換する

    未知のトークンはエラーにせず読み飛ばす。
    先頭トークンがインタプリタの実行ファイル名で終わる場合は、
    実行ファイルとスクリプトの2トークンを読み飛ばす。

    Args:
        args: CLIトークン列
        options: オプション定義
        sink: 診断メッセージの出力先
        policy: 先頭トークンの読み飛ばし設定

    Returns:
        正常に処理されたオプションのみを含む設定ツリー
    """
    sink = sink if sink is not None else default_sink()
    policy = policy or RuntimePrefixPolicy()
    pipeline = OptionPipeline(sink)

    tokens = list(args)
    cli_config: dict[str, Any] = {}
    i = policy.start_index(tokens)

    while i < len(tokens):
        arg = tokens[i]
        i += 1

        option = find_option(arg, options)
        if option is None:
            continue

        if option.is_flag:
            set_by_path(cli_config, option.path, True)
        elif i < len(tokens) and not tokens[i].startswith("-"):
            raw_value = tokens[i]
            i += 1
            pipeline.apply(raw_value, option, cli_config)
        else:
            sink.write(f"Missing value for option {arg}")

    return cli_config
