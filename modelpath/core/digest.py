# core/digest.py
from __future__ import annotations

from modelpath.constants.tool_constants import (
    BLOB_DIGEST_PATTERN,
    DIGEST_FILENAME_SEPARATOR,
    DIGEST_SEPARATOR,
)
from modelpath.errors import InvalidDigestFormatError


def is_valid_digest(digest: str) -> bool:
    """Return True for ``sha256:<64 hex>`` or ``sha256-<64 hex>`` (hex in any case)."""
    return BLOB_DIGEST_PATTERN.fullmatch(digest) is not None


def validate_digest(digest: str) -> str:
    """
    Return `digest` unchanged if it is a sha256 digest.

    Raises
    ------
    InvalidDigestFormatError
        On wrong prefix, separator, length, or non-hex characters.
    """
    if not is_valid_digest(digest):
        raise InvalidDigestFormatError(f"invalid digest format: {digest!r}")
    return digest


def digest_to_filename(digest: str) -> str:
    """
    Filesystem-safe blob name: ``sha256:abc...`` becomes ``sha256-abc...``.
    Hex case is preserved.
    """
    return validate_digest(digest).replace(DIGEST_SEPARATOR, DIGEST_FILENAME_SEPARATOR)


def filename_to_digest(filename: str) -> str:
    """Inverse of :func:`digest_to_filename`; returns the colon form."""
    validate_digest(filename)
    algo, _, hexdigest = filename.partition(DIGEST_FILENAME_SEPARATOR)
    if not hexdigest:
        return filename
    return f"{algo}{DIGEST_SEPARATOR}{hexdigest}"


__all__ = ["is_valid_digest", "validate_digest", "digest_to_filename", "filename_to_digest"]
