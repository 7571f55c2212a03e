"""Shared utilities for rpsprites."""

from rpsprites.core.utils.json import read_json, write_json
from rpsprites.core.utils.logging import configure_logging

__all__ = [
    "configure_logging",
    "read_json",
    "write_json",
]
