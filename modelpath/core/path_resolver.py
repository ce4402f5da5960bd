# core/path_resolver.py
from __future__ import annotations

from pathlib import Path

from modelpath.constants.config_constants import StorePaths
from modelpath.constants.tool_constants import DIR_MODE
from modelpath.errors import InvalidDigestFormatError
from modelpath.logging import get_logger

from .config import get_config
from .digest import digest_to_filename
from .model_address import ModelAddress, parse_model_address

logger = get_logger(__name__)


class PathResolver:
    """
    Map model addresses and blob digests to locations inside a model store.

    The store root is fixed at construction; use :meth:`from_config` to pick up
    the process configuration.

    Side effects differ per operation and are part of the contract:

    - :meth:`manifest_path` never creates directories.
    - :meth:`ensure_manifests_root` creates ``<root>/manifests``.
    - :meth:`blob_path` creates ``<root>/blobs`` before validating the digest.
    """

    def __init__(self, store: StorePaths | Path | str) -> None:
        self.paths = store if isinstance(store, StorePaths) else StorePaths(Path(store))

    @classmethod
    def from_config(cls) -> "PathResolver":
        return cls(get_config().store_paths)

    @property
    def store_root(self) -> Path:
        return self.paths.store_root

    def __repr__(self) -> str:
        return f"PathResolver(store_root={str(self.store_root)!r})"

    # ----------------------------
    # Manifests
    # ----------------------------

    def manifest_path(self, address: ModelAddress) -> Path:
        """
        Return the manifest file for `address`. The file and its parent
        directories may not exist; creating them is up to the caller.

        Raises
        ------
        InvalidAddressError
            If `address` fails validation.
        """
        address.validate()
        path = self.paths.manifest_file(
            address.registry, address.namespace, address.repository, address.tag
        )
        logger.debug("Manifest path for %s: %s", address.short_name(), path)
        return path

    def ensure_manifests_root(self) -> Path:
        """Create (if missing) and return ``<root>/manifests``, the scan root for manifests."""
        path = self.paths.manifests()
        _mkdirs(path)
        return path

    # ----------------------------
    # Blobs
    # ----------------------------

    def blobs_dir(self) -> Path:
        """Return ``<root>/blobs`` without touching the filesystem."""
        return self.paths.blobs()

    def blob_path(self, digest: str = "") -> Path:
        """
        Return the file for `digest`, or the blobs directory when `digest` is empty.

        The blobs directory is created first, even when the digest is then rejected.

        Raises
        ------
        InvalidDigestFormatError
            If a non-empty `digest` is not a sha256 digest.
        OSError
            If the blobs directory cannot be created.
        """
        blobs = self.paths.blobs()
        _mkdirs(blobs)
        if digest == "":
            return blobs
        try:
            filename = digest_to_filename(digest)
        except InvalidDigestFormatError:
            logger.debug("Rejected blob digest %r", digest)
            raise
        return self.paths.blob_file(filename)


def _mkdirs(path: Path) -> None:
    if not path.is_dir():
        logger.info("Creating store directory %s", path)
    path.mkdir(mode=DIR_MODE, parents=True, exist_ok=True)


# ----------------------------
# Module-level conveniences (process configuration)
# ----------------------------


def get_manifest_path(name: ModelAddress | str) -> Path:
    """
    Manifest file for a model identifier or parsed address, under the configured store.
    Does not create directories.
    """
    address = parse_model_address(name) if isinstance(name, str) else name
    return PathResolver.from_config().manifest_path(address)


def ensure_manifests_root() -> Path:
    """Create and return the configured store's manifests directory."""
    return PathResolver.from_config().ensure_manifests_root()


def get_blobs_path(digest: str = "") -> Path:
    """Blob file (or blobs directory for an empty digest) under the configured store."""
    return PathResolver.from_config().blob_path(digest)


__all__ = ["PathResolver", "get_manifest_path", "ensure_manifests_root", "get_blobs_path"]
