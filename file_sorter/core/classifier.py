"""Extension based classification for the File Sorter."""

from typing import Optional

from .models import FALLBACK_CATEGORY, FOLDER_CATEGORY, CategoryTable, extension_of


class Classifier:
    """Maps file extensions to category labels using a CategoryTable."""

    def __init__(self, table: Optional[CategoryTable] = None):
        """
        Initialize the classifier.

        Args:
            table: Category table to classify against. Defaults to the built-in categories.
        """
        self.table = table or CategoryTable.from_mapping()

    def categorize(self, extension: str, is_dir: bool = False) -> str:
        """
        Return the category label for an extension.

        Args:
            extension: Lowercased extension including the leading dot, e.g. ".pdf"
            is_dir: Directories are always labelled as folders

        Returns:
            The owning category, or the fallback label when none matches
        """
        if is_dir:
            return FOLDER_CATEGORY
        return self.table.lookup(extension) or FALLBACK_CATEGORY

    def categorize_name(self, name: str, is_dir: bool = False) -> str:
        """Categorize a file by its name."""
        return self.categorize(extension_of(name), is_dir)
