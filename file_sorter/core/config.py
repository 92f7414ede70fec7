"""Configuration management for the File Sorter."""

import configparser
import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Dict, Optional, Tuple

from .. import __version__
from .exceptions import ConfigurationError
from .models import DEFAULT_CATEGORIES, CategoryTable


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    console_enabled: bool = True
    file_enabled: bool = False
    file_path: Optional[Path] = None
    file_max_size_mb: int = 10
    file_backup_count: int = 5


@dataclass
class OrganizeConfig:
    """Settings for the classify and move pipeline."""
    max_workers: Optional[int] = None  # None: one worker thread per entry
    categories: Dict[str, Tuple[str, ...]] = field(default_factory=lambda: dict(DEFAULT_CATEGORIES))


@dataclass
class AppConfig:
    """Main application configuration."""
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    organize: OrganizeConfig = field(default_factory=OrganizeConfig)

    # Application metadata
    app_name: str = "File Sorter"
    version: str = __version__

    def build_category_table(self) -> CategoryTable:
        """Build the immutable category table for a run."""
        return CategoryTable.from_mapping(self.organize.categories)


class ConfigManager:
    """Loads application configuration from an optional INI file."""

    def __init__(self, config_file: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Path to an INI file. If None, defaults are used.
        """
        self.config_file = Path(config_file) if config_file else None
        self.config = AppConfig()
        self.logger = logging.getLogger(__name__)

        if self.config_file is not None:
            if not self.config_file.exists():
                raise ConfigurationError(f"Configuration file does not exist: {self.config_file}")
            self.load_from_file()

    def load_from_file(self) -> None:
        """
        Load configuration from the INI file.

        Raises:
            ConfigurationError: If the file cannot be parsed or holds invalid values
        """
        parser = configparser.ConfigParser(interpolation=None)
        # Category names are directory names, keep their case
        parser.optionxform = str
        try:
            parser.read(self.config_file)

            if 'logging' in parser:
                log_section = parser['logging']
                if 'level' in log_section:
                    self.config.logging.level = log_section.get('level')
                if 'format' in log_section:
                    self.config.logging.format = log_section.get('format')
                if 'console_enabled' in log_section:
                    self.config.logging.console_enabled = log_section.getboolean('console_enabled')
                if 'file_enabled' in log_section:
                    self.config.logging.file_enabled = log_section.getboolean('file_enabled')
                if 'file_path' in log_section:
                    self.config.logging.file_path = Path(log_section.get('file_path'))
                if 'file_max_size_mb' in log_section:
                    self.config.logging.file_max_size_mb = log_section.getint('file_max_size_mb')
                if 'file_backup_count' in log_section:
                    self.config.logging.file_backup_count = log_section.getint('file_backup_count')

            if 'organize' in parser:
                organize_section = parser['organize']
                if 'max_workers' in organize_section:
                    workers = organize_section.get('max_workers').strip()
                    self.config.organize.max_workers = (
                        int(workers) if workers and workers != 'None' else None
                    )

            if 'categories' in parser:
                self.config.organize.categories = {
                    name: tuple(re.split(r"[,\s]+", value.strip()))
                    for name, value in parser['categories'].items()
                    if value.strip()
                }
        except (configparser.Error, ValueError) as e:
            raise ConfigurationError(f"Invalid configuration in {self.config_file}: {e}") from e

        # Surface extension collisions now rather than at the first run
        self.config.build_category_table()
        self.logger.info(f"Configuration loaded from {self.config_file}")

    def get_config(self) -> AppConfig:
        """Get the current configuration."""
        return self.config


# Global configuration instance
_config_manager = None


def get_config() -> AppConfig:
    """Get the global application configuration."""
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager.get_config()


def setup_config(config_file: Optional[Path] = None) -> ConfigManager:
    """
    Set up global configuration.

    Args:
        config_file: Optional path to configuration file

    Returns:
        ConfigManager instance
    """
    global _config_manager
    _config_manager = ConfigManager(config_file)
    return _config_manager
