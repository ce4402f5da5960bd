"""modelpath/core/store.py

Read-only inspection of a local model store: enumerate manifests and blobs.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from modelpath.logging import get_logger

from .digest import filename_to_digest, is_valid_digest
from .model_address import ModelAddress
from .path_resolver import PathResolver

logger = get_logger(__name__)

# registry / namespace / repository / tag
_MANIFEST_DEPTH = 4


@dataclass(frozen=True)
class ManifestEntry:
    address: ModelAddress
    path: Path
    size: int
    mtime: float  # POSIX timestamp

    @property
    def mtime_dt(self) -> datetime:
        return datetime.fromtimestamp(self.mtime, tz=timezone.utc).astimezone()


@dataclass(frozen=True)
class BlobEntry:
    digest: str  # colon form
    path: Path
    size: int
    mtime: float

    @property
    def mtime_dt(self) -> datetime:
        return datetime.fromtimestamp(self.mtime, tz=timezone.utc).astimezone()


class ModelStore:
    """Enumerate what a model store holds. Never creates or deletes anything."""

    def __init__(self, resolver: PathResolver | None = None) -> None:
        self.resolver = resolver or PathResolver.from_config()

    @property
    def root(self) -> Path:
        return self.resolver.store_root

    def iter_manifests(self) -> Iterator[ManifestEntry]:
        base = self.resolver.paths.manifests()
        if not base.is_dir():
            return
        entries = []
        for p in base.rglob("*"):
            rel = p.relative_to(base)
            if len(rel.parts) != _MANIFEST_DEPTH:
                continue
            try:
                if not p.is_file():
                    continue
                st = p.stat()
            except OSError:
                logger.debug("Skipping unreadable manifest %s", p)
                continue
            registry, namespace, repository, tag = rel.parts
            address = ModelAddress(registry=registry, namespace=namespace, repository=repository, tag=tag)
            entries.append(ManifestEntry(address, p, st.st_size, st.st_mtime))
        yield from sorted(entries, key=lambda e: e.address.short_name())

    def iter_blobs(self) -> Iterator[BlobEntry]:
        base = self.resolver.blobs_dir()
        if not base.is_dir():
            return
        for p in sorted(base.iterdir()):
            if not is_valid_digest(p.name):
                continue
            try:
                if not p.is_file():
                    continue
                st = p.stat()
            except OSError:
                logger.debug("Skipping unreadable blob %s", p)
                continue
            yield BlobEntry(filename_to_digest(p.name), p, st.st_size, st.st_mtime)

    def du(self) -> tuple[int, int]:
        files = 0
        total = 0
        for e in (*self.iter_manifests(), *self.iter_blobs()):
            files += 1
            total += e.size
        return files, total


__all__ = ["ManifestEntry", "BlobEntry", "ModelStore"]
