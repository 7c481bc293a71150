"""
Configuration for ego: where the session record lives and scan defaults.
"""

import os
import platform
from pathlib import Path

from ego.logger import get_logger

logger = get_logger(__name__)

APP_NAME = "ego"
SESSION_FILE_NAME = "session.json"
DATA_DIR_ENV = "EGO_DATA_DIR"

# Worker threads used to read files during a scan; 1 reads sequentially.
DEFAULT_WORKERS = 1


def get_data_dir() -> Path:
    """Resolve the per-user data directory for ego."""

    # 1. Environment variable (explicit override)
    override = os.getenv(DATA_DIR_ENV)
    if override:
        return Path(override).expanduser()

    # 2. Platform user-data location
    system = platform.system()
    if system == "Windows":
        roaming = os.getenv("APPDATA")
        if roaming:
            return Path(roaming) / APP_NAME
        return Path.home() / "AppData" / "Roaming" / APP_NAME
    if system == "Darwin":
        return Path.home() / "Library/Application Support" / APP_NAME

    xdg = os.getenv("XDG_DATA_HOME")
    if xdg:
        return Path(xdg) / APP_NAME
    return Path.home() / ".local/share" / APP_NAME


def get_session_file() -> Path:
    """Path of the single session record."""
    return get_data_dir() / SESSION_FILE_NAME


def ensure_data_dir() -> Path:
    """Create the data directory if needed and return it."""
    data_dir = get_data_dir()
    if not data_dir.exists():
        data_dir.mkdir(parents=True, exist_ok=True)
        logger.debug(f"Created data directory: {data_dir}")
    return data_dir
