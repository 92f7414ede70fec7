"""Core engine for classifying, validating and moving files."""

from .models import CategoryTable, FileRecord, MoveAction, ProcessingFailure, RunResult, ScanResult
from .classifier import Classifier
from .validator import validate_record
from .scanner import FileScanner, scan_dir
from .processor import FileProcessor, process_file
from .organizer import Organizer

__all__ = [
    "CategoryTable",
    "FileRecord",
    "MoveAction",
    "ProcessingFailure",
    "RunResult",
    "ScanResult",
    "Classifier",
    "validate_record",
    "FileScanner",
    "scan_dir",
    "FileProcessor",
    "process_file",
    "Organizer",
]
