"""Command line interface for the File Sorter."""
