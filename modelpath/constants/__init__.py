# __init__.py
"""
Public constants API for modelpath.constants.

This module re-exports selected names to provide a clean and stable surface.
"""

# cli_constants
from .cli_constants import DebugMode, SortOption

# config_constants
from .config_constants import StorePaths

# logging_constants
from .logging_constants import (
    LOG_DEFAULT_BACKUPS,
    LOG_DEFAULT_JSON,
    LOG_DEFAULT_LEVEL,
    LOG_DEFAULT_MAX_BYTES,
    LOG_DEFAULT_NAME,
    LOG_DEFAULT_STDERR,
    LOG_ENV_PREFIX,
    LOG_LEVEL_MAP,
    env_log_json,
    env_log_level,  # exported for CLI/apps
    env_log_stderr,
)

# tool_configs
from .tool_configs import ToolConfig, default_store_root, get_config, set_config

# tool_constants
from .tool_constants import (
    _ENV_PREFIX as MODELPATH_ENV_PREFIX,
)
from .tool_constants import (
    BLOB_DIGEST_PATTERN,
    BLOBS_DIRNAME,
    DEFAULT_NAMESPACE,
    DEFAULT_PROTOCOL_SCHEME,
    DEFAULT_REGISTRY,
    DEFAULT_TAG,
    MANIFESTS_DIRNAME,
    STORE_HOME_SUBPATH,
    STORE_ROOT_ENV,
)

__all__ = [
    # tool_constants
    "MODELPATH_ENV_PREFIX",
    "DEFAULT_PROTOCOL_SCHEME",
    "DEFAULT_REGISTRY",
    "DEFAULT_NAMESPACE",
    "DEFAULT_TAG",
    "STORE_ROOT_ENV",
    "STORE_HOME_SUBPATH",
    "MANIFESTS_DIRNAME",
    "BLOBS_DIRNAME",
    "BLOB_DIGEST_PATTERN",
    # config_constants
    "StorePaths",
    # tool_configs
    "ToolConfig",
    "default_store_root",
    "get_config",
    "set_config",
    # logging_constants
    "LOG_ENV_PREFIX",
    "LOG_DEFAULT_NAME",
    "LOG_DEFAULT_LEVEL",
    "LOG_DEFAULT_JSON",
    "LOG_DEFAULT_STDERR",
    "LOG_DEFAULT_MAX_BYTES",
    "LOG_DEFAULT_BACKUPS",
    "LOG_LEVEL_MAP",
    "env_log_level",
    "env_log_json",
    "env_log_stderr",
    # cli_constants
    "DebugMode",
    "SortOption",
]
