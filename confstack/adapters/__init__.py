"""Adapters for the confstack ports."""

from confstack.adapters.fakes import InMemoryFileSource, RecordingSink

__all__ = [
    "InMemoryFileSource",
    "RecordingSink",
]
