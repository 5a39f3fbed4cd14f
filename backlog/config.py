"""
Configuration management for backlog.

Loads settings from ~/.backlog/config.ini with environment variable overrides.
"""

import configparser
import os
from pathlib import Path
from typing import Optional, Dict, Any

from backlog.logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_TODO_DIR = ".todo"
DEFAULT_FILE_NAME = "backlog.json"


class Config:
    """Application configuration manager."""

    def __init__(self, config_path: Optional[Path] = None):
        """
        Initialize configuration manager.

        Args:
            config_path: Path to config file, defaults to ~/.backlog/config.ini
        """
        self.config_path = config_path or self._default_config_path()
        self._config = configparser.ConfigParser()
        self._load()

    def _default_config_path(self) -> Path:
        return Path.home() / ".backlog" / "config.ini"

    def _load(self):
        """Load configuration from file."""
        if self.config_path.exists():
            try:
                self._config.read(self.config_path)
                logger.info(f"Loaded configuration from {self.config_path}")
            except configparser.Error as e:
                logger.warning(f"Failed to read config file: {e}. Using defaults.")
        else:
            logger.debug(f"Config file not found at {self.config_path}. Using defaults.")

    def get_storage_config(self) -> Dict[str, Any]:
        """
        Get storage configuration with environment overrides.

        Environment variables take precedence over config file:
        - BACKLOG_TODO_DIR
        - BACKLOG_FILE_NAME
        - BACKLOG_GLOBAL_DIR

        Returns:
            Dictionary with storage configuration
        """
        global_dir = (os.getenv('BACKLOG_GLOBAL_DIR') or
                      self._config.get('storage', 'global_dir', fallback=''))

        config = {
            'todo_dir': os.getenv('BACKLOG_TODO_DIR') or
                        self._config.get('storage', 'todo_dir', fallback=DEFAULT_TODO_DIR),
            'file_name': os.getenv('BACKLOG_FILE_NAME') or
                         self._config.get('storage', 'file_name', fallback=DEFAULT_FILE_NAME),
            'global_dir': Path(global_dir).expanduser() if global_dir else Path.home() / ".backlog",
        }

        logger.debug(f"Storage config: todo_dir={config['todo_dir']}, "
                     f"file_name={config['file_name']}, global_dir={config['global_dir']}")

        return config

    def get_display_config(self) -> Dict[str, Any]:
        """
        Get display configuration with environment overrides.

        Environment variables take precedence over config file:
        - BACKLOG_HIDE_COMPLETED

        Returns:
            Dictionary with display configuration
        """
        hide_env = os.getenv('BACKLOG_HIDE_COMPLETED', '').lower()
        hide_completed = (
            hide_env == 'true'
            if hide_env
            else self._config.getboolean('display', 'hide_completed', fallback=False)
        )

        config = {
            'hide_completed': hide_completed,
        }

        logger.debug(f"Display config: hide_completed={config['hide_completed']}")

        return config
