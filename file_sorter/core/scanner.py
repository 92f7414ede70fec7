"""Directory scanner for the File Sorter."""

import logging
import os
import time
from pathlib import Path
from typing import List, Optional, Union

from .classifier import Classifier
from .error_handler import ErrorHandler
from .exceptions import FileSystemError, ScanError
from .models import CategoryTable, FileRecord, ScanResult


class FileScanner:
    """Lists one directory level and builds a categorized record per entry."""

    def __init__(self, classifier: Optional[Classifier] = None):
        """
        Initialize the file scanner.

        Args:
            classifier: Classifier used to label entries. Defaults to the built-in categories.
        """
        self.classifier = classifier or Classifier()
        self.error_handler = ErrorHandler()
        self.logger = logging.getLogger(__name__)

    def scan_directory(self, path: Union[str, Path]) -> ScanResult:
        """
        Scan the direct children of a directory.

        Entries whose metadata cannot be read are skipped with a warning. The
        scan itself only fails when the directory cannot be listed.

        Args:
            path: Directory path to scan

        Returns:
            ScanResult with the readable records and the skipped entries

        Raises:
            PathNotFoundError: If the directory does not exist
            PermissionDeniedError: If the directory cannot be read
            FileSystemError: If the path is not a directory or cannot be listed
        """
        path = Path(path)
        start_time = time.time()
        result = ScanResult(directory=path)

        try:
            with os.scandir(path) as entries:
                for entry in entries:
                    try:
                        record = FileRecord.create(entry, self.classifier.categorize)
                    except OSError as e:
                        self.logger.warning(f"Skipping {entry.name}: {e}")
                        result.skipped.append((entry.name, str(e)))
                        continue
                    result.records.append(record)
        except OSError as e:
            self.error_handler.handle_file_system_error(e, path)

        result.records.sort(key=lambda record: record.name)
        result.duration = time.time() - start_time

        self.logger.info(
            f"Scanned {path}: {len(result.records)} entries, {len(result.skipped)} skipped "
            f"in {result.duration:.3f}s"
        )
        return result


def scan_dir(path: Union[str, Path], table: Optional[CategoryTable] = None) -> List[FileRecord]:
    """
    Scan a directory and return its categorized records.

    Raises:
        ScanError: If the directory cannot be listed
    """
    scanner = FileScanner(Classifier(table))
    try:
        return scanner.scan_directory(path).records
    except FileSystemError as e:
        raise ScanError(f"failed to read directory: {e}") from e
