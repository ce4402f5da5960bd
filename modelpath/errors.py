from __future__ import annotations


class ModelPathError(Exception):
    """Base error for model addressing and store path resolution."""


class InvalidAddressError(ModelPathError, ValueError):
    """Raised when a parsed model address is rejected by validation."""


class InvalidDigestFormatError(ModelPathError, ValueError):
    """Raised when a blob digest is not ``sha256`` + ``:``/``-`` + 64 hex characters."""


class InvalidProtocolError(ModelPathError, ValueError):
    """Raised when an address carries a scheme other than http/https."""


class InsecureProtocolError(ModelPathError):
    """Raised when plain http is used without explicitly allowing it."""


class StoreRootError(ModelPathError):
    """Raised when no model store root can be determined."""


__all__ = [
    "ModelPathError",
    "InvalidAddressError",
    "InvalidDigestFormatError",
    "InvalidProtocolError",
    "InsecureProtocolError",
    "StoreRootError",
]
