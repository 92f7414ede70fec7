"""Custom exceptions for the File Sorter."""


class FileSorterError(Exception):
    """Base exception for file sorting errors."""
    pass


class FileSystemError(FileSorterError):
    """Exception for file system related errors."""
    pass


class ScanError(FileSorterError):
    """Exception for directory scanning errors."""
    pass


class ValidationError(FileSorterError):
    """Exception for records that fail sanity checks before a move."""
    pass


class ConfigurationError(FileSorterError):
    """Exception for configuration related errors."""
    pass


class PermissionDeniedError(FileSystemError):
    """Exception for file permission errors."""
    pass


class PathNotFoundError(FileSystemError):
    """Exception for path not found errors."""
    pass


class MoveError(FileSystemError):
    """Exception raised when a file cannot be relocated into its category folder."""

    def __init__(self, message, file_name=None):
        super().__init__(message)
        self.file_name = file_name
