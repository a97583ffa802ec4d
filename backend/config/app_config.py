"""
Runtime Configuration

Reads the backend's settings from environment variables once at import time.

Variables:
- COURSEHUB_DATABASE_URL: SQLAlchemy URL (default: SQLite file in the data dir)
- COURSEHUB_DATA_DIR: Directory for the default database and logs
- COURSEHUB_LOG_LEVEL: Root log level name (default: INFO)
- COURSEHUB_HOST / COURSEHUB_PORT: Bind address for `python main.py`
"""
import os
import logging
from pathlib import Path

from constants import ServerConfig
from exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def get_data_dir() -> Path:
    """
    Resolve the directory holding the default database and log files.

    Returns:
        Data directory path (not created here)
    """
    return Path(os.environ.get('COURSEHUB_DATA_DIR', Path.home() / ".coursehub"))


def get_database_url() -> str:
    """
    Resolve the database URL.

    Falls back to a SQLite file in the data directory, creating the
    directory if needed.
    """
    url = os.environ.get('COURSEHUB_DATABASE_URL')
    if url:
        return url

    data_dir = get_data_dir()
    data_dir.mkdir(parents=True, exist_ok=True)
    return f"sqlite:///{data_dir / 'coursehub.db'}"


def get_log_level() -> int:
    """
    Resolve the root log level.

    Raises:
        ConfigurationError: If the level name is not a logging level
    """
    name = os.environ.get('COURSEHUB_LOG_LEVEL', 'INFO').upper()
    level = logging.getLevelName(name)
    if not isinstance(level, int):
        raise ConfigurationError(f"Unknown log level: {name}", missing_keys=['COURSEHUB_LOG_LEVEL'])
    return level


def get_server_address() -> tuple[str, int]:
    """
    Resolve the host and port the API server binds to.

    Raises:
        ConfigurationError: If COURSEHUB_PORT is not an integer
    """
    host = os.environ.get('COURSEHUB_HOST', ServerConfig.HOST)
    port = os.environ.get('COURSEHUB_PORT', str(ServerConfig.PORT))
    try:
        return host, int(port)
    except ValueError:
        raise ConfigurationError(f"COURSEHUB_PORT must be an integer, got {port!r}")


DATABASE_URL = get_database_url()
