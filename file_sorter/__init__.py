"""File Sorter - Organize a directory into category folders by file extension."""

__version__ = "1.0.0"
__description__ = "Organize a directory into category folders by file extension"

# Import main components for programmatic access
from .core.models import CategoryTable, FileRecord, MoveAction, ProcessingFailure
from .core.classifier import Classifier
from .core.scanner import FileScanner, scan_dir
from .core.processor import FileProcessor, process_file
from .core.organizer import Organizer

__all__ = [
    "CategoryTable",
    "FileRecord",
    "MoveAction",
    "ProcessingFailure",
    "Classifier",
    "FileScanner",
    "scan_dir",
    "FileProcessor",
    "process_file",
    "Organizer",
]
