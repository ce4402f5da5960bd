# modelpath/__init__.py
from __future__ import annotations

from importlib import metadata as _metadata

"""
modelpath public package surface.

Re-exports core symbols at the top-level so that users can:
    import modelpath as mp
    addr = mp.parse_model_address("llama3:8b")
    mp.get_manifest_path(addr)
    mp.get_blobs_path("sha256:...")
"""

# Version
try:
    __version__ = _metadata.version("modelpath")
except _metadata.PackageNotFoundError:  # local dev / not installed
    __version__ = "0.0.1-dev"

# Public core API (re-export)
from .core import (  # noqa: E402
    InsecureProtocolError,
    InvalidAddressError,
    InvalidDigestFormatError,
    InvalidProtocolError,
    ModelAddress,
    ModelPathError,
    ModelStore,
    PathResolver,
    StoreRootError,
    ensure_manifests_root,
    get_blobs_path,
    get_config,
    get_manifest_path,
    parse_model_address,
    reset_config,
    set_store_root,
    temporary_store_root,
    validate_digest,
    validate_model_address,
)

__all__ = [
    "__version__",
    # addresses
    "ModelAddress",
    "parse_model_address",
    "validate_model_address",
    "validate_digest",
    # paths
    "PathResolver",
    "get_manifest_path",
    "ensure_manifests_root",
    "get_blobs_path",
    "ModelStore",
    # config
    "get_config",
    "reset_config",
    "set_store_root",
    "temporary_store_root",
    # errors
    "ModelPathError",
    "InvalidAddressError",
    "InvalidDigestFormatError",
    "InvalidProtocolError",
    "InsecureProtocolError",
    "StoreRootError",
]
