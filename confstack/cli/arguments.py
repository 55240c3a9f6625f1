"""Command-line argument parsing."""

from __future__ import annotations

import argparse
import json
from typing import Optional, Sequence


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="confstack",
        allow_abbrev=False,
        description="confstack - デフォルト・JSONファイル・CLI引数を統合した設定を表示する",
    )

    parser.add_argument(
        "--config",
        type=str,
        default="config.json",
        help="設定ファイルのパス（デフォルト: config.json）",
    )

    parser.add_argument("--debug", action="store_true", help="デバッグモードで実行（詳細ログ）")

    parser.add_argument("--get", type=str, metavar="PATH", help="指定したパスの値のみをJSONで出力")

    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="PATH=VALUE",
        help="設定値を上書き（VALUEはJSONとして解釈、失敗時は文字列）。複数指定可",
    )

    return parser


def parse_arguments(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """コマンドライン引数をパースする

    Args:
        argv: 引数リスト（指定しない場合は sys.argv[1:]）

    Returns:
        パース済み引数
    """
    return build_parser().parse_args(argv)


def parse_override(override: str) -> tuple[str, object]:
    """'path=value' 形式の上書き指定を分解する

    Raises:
        ValueError: '=' を含まない場合
    """
    if "=" not in override:
        raise ValueError(f"Override must look like PATH=VALUE, got: {override}")

    path, raw = override.split("=", 1)
    try:
        value = json.loads(raw)
    except json.JSONDecodeError:
        value = raw
    return path.strip(), value
