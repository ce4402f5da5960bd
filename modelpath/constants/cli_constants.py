# cli_constants.py
from enum import Enum


class DebugMode(str, Enum):
    """Textual logging levels accepted by the CLI."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class SortOption(str, Enum):
    """Sort keys for store listings."""
    name = "name"
    size = "size"
    mtime = "mtime"
