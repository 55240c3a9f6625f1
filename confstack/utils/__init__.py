"""Utility modules for confstack."""

from confstack.utils.diagnostics import LoggerSink, default_sink
from confstack.utils.logging_utils import setup_logging

__all__ = [
    "LoggerSink",
    "default_sink",
    "setup_logging",
]
