"""confstack

Layered configuration for Python programs: defaults, a JSON file, an explicit
mapping and command-line arguments merged into one nested tree.
"""

__version__ = "0.1.0"

# Core types
from confstack.core import UNDEFINED, ConfigError, OptionSpec, ValidationError, ValidatorSpec

# Configuration
from confstack.config import ConfigStore, deep_merge, get_by_path, set_by_path

# CLI
from confstack.cli import OptionPipeline, parse_cli_args

# Parsers and validators
from confstack import parsers, validators

__all__ = [
    "UNDEFINED",
    "ConfigError",
    "ConfigStore",
    "OptionPipeline",
    "OptionSpec",
    "ValidationError",
    "ValidatorSpec",
    "deep_merge",
    "get_by_path",
    "parse_cli_args",
    "parsers",
    "set_by_path",
    "validators",
]
