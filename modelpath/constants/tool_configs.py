# tool_configs.py
import os
from dataclasses import dataclass, field
from pathlib import Path

from modelpath.errors import StoreRootError

from .config_constants import StorePaths
from .logging_constants import env_log_level
from .tool_constants import STORE_HOME_SUBPATH, STORE_ROOT_ENV


def default_store_root() -> Path:
    """
    Determine the model store root, read fresh on every call.

    Priority:
      1) OLLAMA_MODELS, if set (even to an empty string).
      2) ~/.ollama/models.

    Raises
    ------
    StoreRootError
        If the home directory cannot be determined.
    """
    env = os.environ.get(STORE_ROOT_ENV)
    if env is not None:
        return Path(env)
    try:
        home = Path.home()
    except (RuntimeError, KeyError) as e:
        raise StoreRootError(f"Cannot determine home directory for the model store: {e}") from e
    return home.joinpath(*STORE_HOME_SUBPATH)


@dataclass
class ToolConfig:
    """
    Global configuration container for modelpath runtime.
    """

    store_paths: StorePaths = field(default_factory=lambda: StorePaths(default_store_root()))
    log_level: int = field(default_factory=env_log_level)


# Global singleton for convenience (simple and testable)
_GLOBAL: ToolConfig | None = None


def get_config() -> ToolConfig:
    """
    Return the global ToolConfig, creating it on first use.
    No directories are created here; resolvers create them on demand.
    """
    global _GLOBAL
    if _GLOBAL is None:
        _GLOBAL = ToolConfig()
    return _GLOBAL


def set_config(cfg: ToolConfig | None) -> None:
    """
    Replace the global ToolConfig. Passing None drops it so the next
    get_config() re-reads the environment.
    """
    global _GLOBAL
    _GLOBAL = cfg
