"""Configuration loading, merging and dot-path access."""

from confstack.config.loader import LocalFileSource, load_config_file, parse_config_text
from confstack.config.merging import deep_merge, merge_layers
from confstack.config.paths import get_by_path, set_by_path
from confstack.config.config_store import ConfigStore

__all__ = [
    "ConfigStore",
    "LocalFileSource",
    "deep_merge",
    "get_by_path",
    "load_config_file",
    "merge_layers",
    "parse_config_text",
    "set_by_path",
]
