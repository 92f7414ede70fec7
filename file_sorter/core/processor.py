"""Per-file processing: validate, then preview or perform the move."""

import logging
import os
import time
from pathlib import Path
from typing import Optional

from .exceptions import MoveError
from .models import FileRecord, MoveAction
from .validator import validate_record


class FileProcessor:
    """Moves a single record into the category folder next to it."""

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)

    def destination_for(self, record: FileRecord) -> Path:
        """Target path of a record: ``<parent>/<category>/<name>``."""
        return Path(record.path).parent / record.category / record.name

    def process(self, record: FileRecord, dry_run: bool = False) -> Optional[MoveAction]:
        """
        Process one record.

        Directories are left alone and return None. Other records are
        validated first, so an invalid record never touches the filesystem.

        Args:
            record: Scanned record to process
            dry_run: Only report the intended move

        Returns:
            MoveAction describing the move, or None for directories

        Raises:
            ValidationError: If the record fails validation
            MoveError: If the category folder cannot be created or the move fails
        """
        start_time = time.perf_counter()
        try:
            if record.is_dir:
                return None

            validate_record(record)

            destination = self.destination_for(record)
            if dry_run:
                action = MoveAction(record, destination, applied=False)
                self.logger.debug(action.describe())
                return action

            self._move(record, destination)
            return MoveAction(record, destination, applied=True)
        finally:
            elapsed = time.perf_counter() - start_time
            self.logger.info(f"Processed {record.name!r} in {elapsed:.4f}s")

    def _move(self, record: FileRecord, destination: Path) -> None:
        # exist_ok keeps concurrent creators of the same category folder from failing
        try:
            destination.parent.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise MoveError(f"failed to create directory: {e}", file_name=record.name) from e

        try:
            os.rename(record.path, destination)
        except OSError as e:
            raise MoveError(f"failed to move file: {e}", file_name=record.name) from e

        self.logger.debug(f"Moved: {record.path} -> {destination}")


def process_file(record: FileRecord, dry_run: bool = False) -> Optional[MoveAction]:
    """Process one record with a default FileProcessor."""
    return FileProcessor().process(record, dry_run)
