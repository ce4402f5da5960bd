# core/config.py
from __future__ import annotations

from collections.abc import Generator
from contextlib import contextmanager
from pathlib import Path
from threading import RLock

from modelpath.constants.config_constants import StorePaths
from modelpath.constants.tool_configs import ToolConfig
from modelpath.constants.tool_configs import get_config as _get_config
from modelpath.constants.tool_configs import set_config as _set_config
from modelpath.logging import get_logger

_LOG = get_logger(__name__)
_LOCK = RLock()


def get_config() -> ToolConfig:
    """
    Return the global ToolConfig managed by modelpath.constants.tool_configs.

    The store root is read from the environment when the config is first built.
    """
    with _LOCK:
        return _get_config()


def reset_config() -> None:
    """Drop the global config so the next get_config() re-reads the environment."""
    with _LOCK:
        _set_config(None)
        _LOG.debug("Configuration reset")


def set_store_root(new_root: Path | str) -> None:
    """
    Override the model store root while preserving the rest of the configuration.

    Parameters
    ----------
    new_root : Path or str
        New root path. Will be expanded and resolved.
    """
    root = Path(new_root).expanduser().resolve()
    with _LOCK:
        old = _get_config()
        _set_config(ToolConfig(store_paths=StorePaths(root), log_level=old.log_level))
        _LOG.info("Model store root set to: %s", root)


@contextmanager
def temporary_store_root(temp_root: Path | str) -> Generator[None, None, None]:
    """
    Temporarily override the store root (useful for tests or isolated runs).

    Example
    -------
    >>> with temporary_store_root('./.tmp_models'):
    ...     pass
    """
    prev = get_config()
    set_store_root(temp_root)
    try:
        yield
    finally:
        with _LOCK:
            _set_config(prev)
        _LOG.info("Model store root restored to: %s", prev.store_paths.store_root)


__all__ = [
    "get_config",
    "reset_config",
    "set_store_root",
    "temporary_store_root",
    "ToolConfig",
    "StorePaths",
]
