"""Sanity checks run on a record before any filesystem mutation."""

from .exceptions import ValidationError
from .models import FileRecord


def validate_record(record: FileRecord) -> None:
    """
    Check that a record is safe to move.

    Directories always pass. Files need a non-blank name and a positive size.

    Raises:
        ValidationError: If the record fails a check
    """
    if record.is_dir:
        return
    if not record.name.strip():
        raise ValidationError("filename cannot be empty")
    if record.size <= 0:
        raise ValidationError("file size must be positive")
