"""
Organization module for sorting files into category directories.

This module classifies the files of a directory by extension or by file type
and moves them into matching subdirectories, with a dry-run mode that only
reports where each file would go.
"""

from .file_organizer import FileMove, FileOrganizer, OrganizationResult
from .strategy import (
    FILE_TYPE_CATEGORIES,
    OrganizeMode,
    RunOptions,
    classify,
    get_destination_by_extension,
    get_destination_by_type,
)

__all__ = [
    "FileMove",
    "FileOrganizer",
    "OrganizationResult",
    "FILE_TYPE_CATEGORIES",
    "OrganizeMode",
    "RunOptions",
    "classify",
    "get_destination_by_extension",
    "get_destination_by_type",
]
