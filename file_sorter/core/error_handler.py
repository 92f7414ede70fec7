"""Error handling utilities for the File Sorter."""

import errno
import logging
from pathlib import Path
from typing import List, Union

from .exceptions import FileSystemError, PathNotFoundError, PermissionDeniedError


logger = logging.getLogger(__name__)


class ErrorHandler:
    """Centralized error translation and reporting."""

    def __init__(self, logger: logging.Logger = None):
        """
        Initialize error handler.

        Args:
            logger: Logger instance to use for error reporting
        """
        self.logger = logger or logging.getLogger(__name__)

    def handle_file_system_error(self, error: OSError, file_path: Union[str, Path]):
        """
        Translate an OSError into the matching domain exception and raise it.

        Args:
            error: The exception that occurred
            file_path: Path where the error occurred

        Raises:
            PermissionDeniedError: Access to the path was refused
            PathNotFoundError: The path does not exist
            FileSystemError: Any other file system failure
        """
        file_path = Path(file_path) if isinstance(file_path, str) else file_path

        if error.errno in (errno.EACCES, errno.EPERM):
            self.logger.warning(f"Permission denied accessing {file_path}: {error}")
            raise PermissionDeniedError(f"Permission denied: {file_path}") from error
        elif error.errno == errno.ENOENT:
            self.logger.warning(f"Path not found: {file_path}")
            raise PathNotFoundError(f"Path does not exist: {file_path}") from error
        elif error.errno == errno.ENOTDIR:
            self.logger.error(f"Not a directory: {file_path}")
            raise FileSystemError(f"Path is not a directory: {file_path}") from error
        elif error.errno == errno.ENOSPC:
            self.logger.error(f"No space left on device: {error}")
            raise FileSystemError("No space left on device") from error
        else:
            self.logger.error(f"File system error accessing {file_path}: {error}")
            raise FileSystemError(f"Cannot access {file_path}: {error}") from error

    def log_error_summary(self, errors: List[Exception], operation: str = "operation"):
        """
        Log a summary of errors that occurred during an operation.

        Args:
            errors: List of exceptions that occurred
            operation: Description of the operation
        """
        if not errors:
            return

        error_counts = {}
        for error in errors:
            error_type = type(error).__name__
            error_counts[error_type] = error_counts.get(error_type, 0) + 1

        self.logger.warning(f"Error summary for {operation}:")
        for error_type, count in error_counts.items():
            self.logger.warning(f"  {error_type}: {count} occurrences")
