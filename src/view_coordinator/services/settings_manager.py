"""Settings Manager - Handles logging, resource and window configuration."""

import logging
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_WINDOW_WIDTH = 1200
DEFAULT_WINDOW_HEIGHT = 800


class SettingsManager:
    """
    Manages application settings.

    Reads values from a .env file in the project root, with the process
    environment taking precedence unless ``reload_env`` is called.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, uses the current working directory.
        """
        if project_root is None:
            project_root = Path.cwd()

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_log_level(self) -> int:
        """Get the logging level, falling back to INFO for unknown names."""
        name = (os.getenv("VIEW_COORDINATOR_LOG_LEVEL") or "").strip().upper()
        level = logging.getLevelName(name) if name else logging.INFO
        return level if isinstance(level, int) else logging.INFO

    def get_ui_dir(self) -> Path:
        """Get the directory holding .ui view descriptors."""
        value = os.getenv("VIEW_COORDINATOR_UI_DIR")
        if value and value.strip():
            return Path(value.strip())
        return self._project_root / "ui"

    def get_window_size(self) -> tuple[int, int]:
        """Get the initial window (width, height)."""
        return (
            self._positive_int("VIEW_COORDINATOR_WINDOW_WIDTH", DEFAULT_WINDOW_WIDTH),
            self._positive_int("VIEW_COORDINATOR_WINDOW_HEIGHT", DEFAULT_WINDOW_HEIGHT),
        )

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _positive_int(key: str, default: int) -> int:
        value = os.getenv(key)
        if value is None:
            return default
        try:
            number = int(value.strip())
        except ValueError:
            return default
        return number if number > 0 else default
