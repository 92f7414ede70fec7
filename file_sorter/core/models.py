"""Core data models for the File Sorter."""

import os
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from types import MappingProxyType
from typing import Callable, Dict, FrozenSet, Iterable, List, Mapping, Optional, Tuple

from .exceptions import ConfigurationError


FOLDER_CATEGORY = "Folder"
FALLBACK_CATEGORY = "Other"

DEFAULT_CATEGORIES: Dict[str, Tuple[str, ...]] = {
    "Images": (".jpg", ".jpeg", ".png", ".gif"),
    "Docs": (".pdf", ".docx", ".txt", ".md"),
    "Videos": (".mp4", ".mov", ".avi", ".mkv"),
    "Audio": (".mp3", ".wav", ".ogg"),
}


def extension_of(name: str) -> str:
    """Return the lowercased extension of a file name, including the dot."""
    return os.path.splitext(name)[1].lower()


def normalize_extension(extension: str) -> str:
    """Lowercase an extension and make sure it carries its leading dot."""
    extension = extension.strip().lower()
    if extension and not extension.startswith("."):
        extension = "." + extension
    return extension


class CategoryTable:
    """Read-only mapping of category label to the extensions it owns.

    Every extension belongs to at most one category. Collisions are rejected
    when the table is built, so lookups never depend on iteration order.
    """

    def __init__(self, categories: Mapping[str, Iterable[str]]):
        owners: Dict[str, str] = {}
        table: Dict[str, FrozenSet[str]] = {}

        for category, extensions in categories.items():
            if not category or not category.strip():
                raise ConfigurationError("Category name cannot be empty")
            if category in (FOLDER_CATEGORY, FALLBACK_CATEGORY):
                raise ConfigurationError(f"Category name '{category}' is reserved")

            normalized = set()
            for extension in extensions:
                extension = normalize_extension(extension)
                if not extension:
                    raise ConfigurationError(f"Empty extension in category '{category}'")
                owner = owners.get(extension)
                if owner is not None and owner != category:
                    raise ConfigurationError(
                        f"Extension '{extension}' is claimed by both '{owner}' and '{category}'"
                    )
                owners[extension] = category
                normalized.add(extension)
            table[category] = frozenset(normalized)

        self._owners = MappingProxyType(owners)
        self._table = MappingProxyType(table)

    @classmethod
    def from_mapping(cls, categories: Optional[Mapping[str, Iterable[str]]] = None) -> "CategoryTable":
        """Build a table, falling back to the default categories."""
        return cls(DEFAULT_CATEGORIES if categories is None else categories)

    @property
    def categories(self) -> List[str]:
        return list(self._table)

    def extensions_for(self, category: str) -> FrozenSet[str]:
        return self._table.get(category, frozenset())

    def lookup(self, extension: str) -> Optional[str]:
        """Return the category owning ``extension``, or None."""
        return self._owners.get(extension.lower())

    def __contains__(self, extension: str) -> bool:
        return extension.lower() in self._owners

    def __repr__(self) -> str:
        return f"CategoryTable({dict(self._table)!r})"


@dataclass(frozen=True)
class FileRecord:
    """Represents one directory entry observed during a scan."""
    name: str
    path: str
    size: int
    modified_date: datetime
    is_dir: bool
    extension: str
    category: str

    @classmethod
    def create(cls, entry: os.DirEntry, categorize: Callable[[str, bool], str]) -> "FileRecord":
        """
        Create a categorized FileRecord from a directory entry.

        Args:
            entry: Entry yielded by ``os.scandir``
            categorize: Callable mapping (extension, is_dir) to a category label

        Raises:
            OSError: If the entry's metadata cannot be read
        """
        stat = entry.stat()
        is_dir = entry.is_dir()
        extension = extension_of(entry.name)
        return cls(
            name=entry.name,
            path=entry.path,
            size=stat.st_size,
            modified_date=datetime.fromtimestamp(stat.st_mtime),
            is_dir=is_dir,
            extension=extension,
            category=categorize(extension, is_dir),
        )


@dataclass(frozen=True)
class MoveAction:
    """A planned or completed relocation of one file."""
    record: FileRecord
    destination: Path
    applied: bool

    def describe(self) -> str:
        verb = "Moved" if self.applied else "Would move"
        return f"{verb} {self.record.name!r} to {self.record.category}"


@dataclass(frozen=True)
class ProcessingFailure:
    """A per-file failure reported by a processing task."""
    name: str
    error: Exception

    def __str__(self) -> str:
        return f"file {self.name!r}: {self.error}"


@dataclass
class ScanResult:
    """Result of scanning one directory level."""
    directory: Path
    records: List[FileRecord] = field(default_factory=list)
    skipped: List[Tuple[str, str]] = field(default_factory=list)
    duration: float = 0.0

    @property
    def total_entries(self) -> int:
        """Entries attempted, readable or not."""
        return len(self.records) + len(self.skipped)


@dataclass
class RunResult:
    """Result of organizing a set of scanned records."""
    total: int
    dry_run: bool
    actions: List[MoveAction] = field(default_factory=list)
    skipped_directories: int = 0
    failures: List[ProcessingFailure] = field(default_factory=list)
    duration: float = 0.0

    @property
    def moved(self) -> int:
        return sum(1 for action in self.actions if action.applied)

    @property
    def previewed(self) -> int:
        return sum(1 for action in self.actions if not action.applied)

    @property
    def success(self) -> bool:
        return not self.failures
