"""
File organizer for sorting a directory into category subdirectories.

Handles the actual file operations: enumerating the source directory,
classifying each file and renaming it into place, in parallel, with a
dry-run mode that only reports destinations.
"""

import logging
import os
import threading
from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import Callable, Dict, List, Optional

from pydantic import BaseModel, Field

from ..errors import ConfigError, MoveError
from ..shared.file_utils import collect_files
from .strategy import OrganizeMode, RunOptions, classify

logger = logging.getLogger(__name__)

ProgressCallback = Callable[["FileMove"], None]


class FileMove(BaseModel):
    """A single planned or performed file relocation."""

    source: Path
    destination: Path
    category: str


class OrganizationResult(BaseModel):
    """Result of an organize run."""

    source: Path
    mode: OrganizeMode
    dry_run: bool = False
    total_files: int = 0
    moved: int = 0
    moves: List[FileMove] = Field(default_factory=list)

    def categories(self) -> Dict[str, int]:
        """Count of files per destination category."""
        counts: Dict[str, int] = {}
        for move in self.moves:
            counts[move.category] = counts.get(move.category, 0) + 1
        return dict(sorted(counts.items()))


class FileOrganizer:
    """Organize the files of one directory according to the run options."""

    def __init__(
        self,
        options: RunOptions,
        progress_callback: Optional[ProgressCallback] = None,
    ):
        """
        Initialize file organizer.

        Args:
            options: Run options (source, mode, dry-run, workers)
            progress_callback: Called once per file after it is handled
        """
        self.options = options
        self.source_directory = Path(options.source)
        self.progress_callback = progress_callback
        self._abort = threading.Event()
        self._lock = threading.Lock()

    def get_target_path(self, file_path: Path, category: str) -> Path:
        """Destination of a file: <source>/<category>/<file name>."""
        return self.source_directory / category / file_path.name

    def move_file(self, file_path: Path, category: str) -> FileMove:
        """
        Move a single file into its category directory.

        Args:
            file_path: File to move
            category: Destination category name

        Returns:
            The performed (or, in dry-run, planned) move

        Raises:
            MoveError: If the directory cannot be created or the rename fails
        """
        file_path = Path(file_path)
        if not file_path.name:
            raise MoveError(
                f"Cannot determine file name of '{file_path}'",
                file_path,
                self.source_directory / category,
            )

        target_path = self.get_target_path(file_path, category)
        move = FileMove(source=file_path, destination=target_path, category=category)

        if self.options.dry_run:
            logger.debug(f"[DRY RUN] Would move {file_path} → {target_path}")
            return move

        try:
            target_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MoveError(
                f"Cannot create directory '{target_path.parent}': {e}",
                file_path,
                target_path,
            ) from e

        try:
            os.rename(file_path, target_path)
        except OSError as e:
            raise MoveError(
                f"Cannot move '{file_path}' to '{target_path}': {e}",
                file_path,
                target_path,
            ) from e

        logger.debug(f"Moved {file_path} → {target_path}")
        return move

    def _process_file(self, file_path: Path) -> Optional[FileMove]:
        """Classify and move one file. Returns None if the run was aborted."""
        if self._abort.is_set():
            return None

        try:
            category = classify(file_path, self.options.mode)
            move = self.move_file(file_path, category)

            if self.progress_callback:
                with self._lock:
                    self.progress_callback(move)
        except Exception:
            self._abort.set()
            raise

        return move

    def validate(self) -> None:
        """Raise ConfigError if the source directory does not exist."""
        if not self.source_directory.exists():
            raise ConfigError(
                f"Source directory '{self.source_directory}' doesn't exist"
            )

    def collect(self) -> List[Path]:
        """Validate the source directory and list the files to organize."""
        self.validate()
        return collect_files(self.source_directory)

    def organize(self, files: Optional[List[Path]] = None) -> OrganizationResult:
        """
        Organize the source directory.

        Args:
            files: Files to organize, as returned by collect(). Collected
                from the source directory when omitted.

        Returns:
            Organization result with every move in completion order

        Raises:
            ConfigError: If the source directory does not exist
            EnumerationError: If the source directory cannot be read
            MoveError: For the first file that could not be moved
            Exception: Whatever the first failing task raised, such as an
                error from the progress callback
        """
        if files is None:
            files = self.collect()

        logger.info(
            f"Starting organization of {self.source_directory} "
            f"by {self.options.mode.value} "
            f"({'DRY RUN' if self.options.dry_run else 'LIVE'})"
        )

        result = OrganizationResult(
            source=self.source_directory,
            mode=self.options.mode,
            dry_run=self.options.dry_run,
            total_files=len(files),
        )

        if not files:
            return result

        self._abort.clear()
        first_error: Optional[Exception] = None
        max_workers = min(self.options.max_workers, len(files))

        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures: List[Future] = [
                executor.submit(self._process_file, file_path) for file_path in files
            ]

            for future in as_completed(futures):
                if future.cancelled():
                    continue
                try:
                    move = future.result()
                except Exception as e:
                    if first_error is None:
                        logger.debug(f"Aborting after failed task: {e}")
                        first_error = e
                        self._abort.set()
                        for pending in futures:
                            pending.cancel()
                    continue

                if move is not None:
                    result.moves.append(move)

        if first_error is not None:
            raise first_error

        if not self.options.dry_run:
            result.moved = len(result.moves)

        logger.info(
            f"Organized {len(result.moves)} of {result.total_files} files"
            f"{' (dry run)' if self.options.dry_run else ''}"
        )
        return result
