"""
Organization strategies for sorting files.

Defines the organize modes, the file-type category table, and the run options
that select between them.
"""

import os
from enum import Enum
from pathlib import Path
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

UNKNOWN_CATEGORY = "Unknown"
OTHER_CATEGORY = "Other"


class OrganizeMode(str, Enum):
    """How a file's destination subdirectory is chosen."""

    EXTENSION = "extension"  # README.MD -> md/
    TYPE = "type"  # README.MD -> Documents/


# Category name -> extensions (lowercase, without the dot). Sets are disjoint.
FILE_TYPE_CATEGORIES: Dict[str, FrozenSet[str]] = {
    "Images": frozenset({"jpg", "jpeg", "png", "gif", "bmp", "svg", "webp"}),
    "Documents": frozenset(
        {"pdf", "doc", "docx", "xls", "xlsx", "ppt", "pptx", "txt", "rtf", "md"}
    ),
    "Archives": frozenset({"zip", "rar", "tar", "gz", "7z", "bz2"}),
    "Audio": frozenset({"mp3", "wav", "flac", "aac", "ogg"}),
    "Videos": frozenset({"mp4", "mov", "avi", "mkv", "flv", "wmv"}),
    "Executables": frozenset({"exe", "msi", "dmg", "deb", "rpm"}),
    "Data": frozenset({"json", "xml", "yaml", "yml", "csv"}),
    "Web": frozenset({"html", "htm", "css", "js", "ts", "jsx", "tsx"}),
    "Code": frozenset({"rs", "c", "cpp", "h", "hpp", "java", "py", "go", "sh"}),
}

EXTENSION_TO_CATEGORY: Dict[str, str] = {
    ext: category
    for category, extensions in FILE_TYPE_CATEGORIES.items()
    for ext in extensions
}


def get_extension(file_path: Path) -> str:
    """
    Get the lowercased extension of a file, without the leading dot.

    Args:
        file_path: Path to inspect

    Returns:
        Extension such as "jpg", or "" if the name has none
    """
    return Path(file_path).suffix.lstrip(".").lower()


def get_destination_by_extension(file_path: Path) -> str:
    """Category named after the file's extension, or "Unknown"."""
    return get_extension(file_path) or UNKNOWN_CATEGORY


def get_destination_by_type(file_path: Path) -> str:
    """Category from the file-type table, or "Other"."""
    return EXTENSION_TO_CATEGORY.get(get_extension(file_path), OTHER_CATEGORY)


def classify(file_path: Path, mode: OrganizeMode) -> str:
    """
    Get the destination subdirectory name for a file.

    Args:
        file_path: File to classify
        mode: Organize mode selecting the strategy

    Returns:
        Destination category name
    """
    if OrganizeMode(mode) == OrganizeMode.EXTENSION:
        return get_destination_by_extension(file_path)
    return get_destination_by_type(file_path)


class RunOptions(BaseModel):
    """Options for a single organize run."""

    source: Path = Field(
        default=Path("."),
        description="Directory whose immediate files are organized",
    )

    mode: OrganizeMode = Field(
        default=OrganizeMode.TYPE,
        description="Organize by extension or by file type",
    )

    dry_run: bool = Field(
        default=False,
        description="Report destinations without moving anything",
    )

    verbose: bool = Field(
        default=False,
        description="Report per-file progress and a summary",
    )

    workers: Optional[int] = Field(
        default=None,
        description="Worker pool size (defaults to the CPU count)",
    )

    model_config = ConfigDict(frozen=True)

    @field_validator("workers")
    @classmethod
    def _check_workers(cls, value: Optional[int]) -> Optional[int]:
        if value is not None and value < 1:
            raise ValueError("workers must be at least 1")
        return value

    @property
    def max_workers(self) -> int:
        """Number of worker threads to use."""
        return self.workers or os.cpu_count() or 1
