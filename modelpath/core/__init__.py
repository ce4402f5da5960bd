# core/__init__.py
from __future__ import annotations

from modelpath.errors import (
    InsecureProtocolError,
    InvalidAddressError,
    InvalidDigestFormatError,
    InvalidProtocolError,
    ModelPathError,
    StoreRootError,
)

from .config import get_config, reset_config, set_store_root, temporary_store_root
from .digest import digest_to_filename, is_valid_digest, validate_digest
from .model_address import ModelAddress, parse_model_address, validate_model_address
from .path_resolver import PathResolver, ensure_manifests_root, get_blobs_path, get_manifest_path
from .store import BlobEntry, ManifestEntry, ModelStore

__all__ = [
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
    # addresses
    "ModelAddress",
    "parse_model_address",
    "validate_model_address",
    # digests
    "is_valid_digest",
    "validate_digest",
    "digest_to_filename",
    # paths
    "PathResolver",
    "get_manifest_path",
    "ensure_manifests_root",
    "get_blobs_path",
    # store
    "ModelStore",
    "ManifestEntry",
    "BlobEntry",
]
