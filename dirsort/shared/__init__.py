"""
Shared utilities for dirsort.
"""

from .file_utils import collect_files, setup_logging

__all__ = [
    "collect_files",
    "setup_logging",
]
