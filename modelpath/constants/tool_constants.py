# tool_constants.py
from __future__ import annotations

import re

# Environment variable prefix used across the project (e.g., MODELPATH_LOG_LEVEL)
_ENV_PREFIX: str = "MODELPATH_"

# Address defaults, applied independently per field when parsing
DEFAULT_PROTOCOL_SCHEME: str = "https"
DEFAULT_REGISTRY: str = "registry.ollama.ai"
DEFAULT_NAMESPACE: str = "library"
DEFAULT_TAG: str = "latest"

# Schemes an external fetcher is allowed to use
ALLOWED_PROTOCOL_SCHEMES: tuple[str, ...] = ("http", "https")
INSECURE_PROTOCOL_SCHEME: str = "http"

# Model store root
STORE_ROOT_ENV: str = "OLLAMA_MODELS"
STORE_HOME_SUBPATH: tuple[str, ...] = (".ollama", "models")

# Store layout
MANIFESTS_DIRNAME: str = "manifests"
BLOBS_DIRNAME: str = "blobs"
DIR_MODE: int = 0o755

# Only actual sha256 digests are accepted (use fullmatch, '$' tolerates a trailing newline)
BLOB_DIGEST_PATTERN: re.Pattern[str] = re.compile(r"^sha256[:-][0-9a-fA-F]{64}$")
DIGEST_SEPARATOR: str = ":"
DIGEST_FILENAME_SEPARATOR: str = "-"
