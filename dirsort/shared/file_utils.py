"""
File utilities for dirsort.

Directory listing and logging setup shared by the organizer and the CLI.
"""

import logging
from pathlib import Path
from typing import List

from ..errors import EnumerationError

logger = logging.getLogger(__name__)


def collect_files(directory: Path) -> List[Path]:
    """
    Collect the regular files directly inside a directory.

    Subdirectories are skipped, not descended into. Symlinks count as files
    when they point at one.

    Args:
        directory: Directory to scan

    Returns:
        List of file paths, in filesystem enumeration order

    Raises:
        EnumerationError: If the directory cannot be read
    """
    directory = Path(directory)
    files: List[Path] = []

    try:
        for entry in directory.iterdir():
            if entry.is_file():
                files.append(entry)
    except OSError as e:
        logger.debug(f"Error reading directory {directory}: {e}")
        raise EnumerationError(f"Cannot read directory '{directory}': {e}") from e

    logger.info(f"Found {len(files)} files in {directory}")
    return files


def setup_logging(verbose: bool = False, quiet: bool = False) -> None:
    """
    Configure logging for the application.

    Args:
        verbose: If True, set logging level to DEBUG
        quiet: If True, set logging level to WARNING
    """
    if quiet:
        level = logging.WARNING
    elif verbose:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
