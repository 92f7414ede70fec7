"""Main entry point for the File Sorter.

This allows the package to be run as:
    python -m file_sorter
"""

from .cli.main import cli

if __name__ == "__main__":
    cli()
