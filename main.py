#!/usr/bin/env python
"""
confstack - メインエントリーポイント

デフォルト値・JSON設定ファイル・CLI引数を統合した設定を表示します。
"""

import sys

from confstack.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
