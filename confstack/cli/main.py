"""confstack command-line entry point."""

from __future__ import annotations

import json
import logging
import sys
from typing import Optional, Sequence

from confstack.cli.arguments import parse_arguments, parse_override
from confstack.config import ConfigStore
from confstack.core.dto import UNDEFINED
from confstack.utils import setup_logging


def main(argv: Optional[Sequence[str]] = None) -> int:
    """メイン処理

    Args:
        argv: 引数リスト（指定しない場合は sys.argv[1:]）

    Returns:
        終了コード
    """
    args = parse_arguments(argv)

    # 標準出力はJSON出力専用
    setup_logging(args.debug, stream=sys.stderr)
    logger = logging.getLogger(__name__)

    try:
        overrides = [parse_override(item) for item in args.overrides]
    except ValueError as e:
        logger.error(str(e))
        return 2

    store = ConfigStore(config_file_path=args.config)

    for path, value in overrides:
        store.set_value(path, value)

    config = store.get()

    if args.get:
        value = store.get_value(args.get, UNDEFINED)
        if value is UNDEFINED:
            logger.error(f"設定値が存在しません: {args.get}")
            return 1
        print(json.dumps(value, indent=2, ensure_ascii=False, default=str))
    else:
        print(json.dumps(config, indent=2, ensure_ascii=False, default=str))

    return 0


if __name__ == "__main__":
    sys.exit(main())
