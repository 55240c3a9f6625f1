"""Command-line token handling."""

from confstack.cli.arguments import parse_arguments
from confstack.cli.pipeline import SKIP, OptionPipeline
from confstack.cli.tokenizer import find_option, parse_cli_args

__all__ = [
    "SKIP",
    "OptionPipeline",
    "find_option",
    "parse_arguments",
    "parse_cli_args",
]
