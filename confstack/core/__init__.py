"""Core data types, ports and errors."""

from confstack.core.dto import UNDEFINED, OptionSpec, ValidatorSpec, is_undefined
from confstack.core.errors import ConfigError, ConfigFileError, ValidationError
from confstack.core.interfaces import (
    ConfigValidator,
    DiagnosticSink,
    FileSource,
    OptionValidator,
    Parser,
)
from confstack.core.policy import DEFAULT_RUNTIME_SUFFIXES, RuntimePrefixPolicy

__all__ = [
    "DEFAULT_RUNTIME_SUFFIXES",
    "UNDEFINED",
    "ConfigError",
    "ConfigFileError",
    "ConfigValidator",
    "DiagnosticSink",
    "FileSource",
    "OptionSpec",
    "OptionValidator",
    "Parser",
    "RuntimePrefixPolicy",
    "ValidationError",
    "ValidatorSpec",
    "is_undefined",
]
