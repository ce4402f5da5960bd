# config_constants.py
from dataclasses import dataclass
from pathlib import Path

from .tool_constants import BLOBS_DIRNAME, MANIFESTS_DIRNAME


@dataclass(frozen=True)
class StorePaths:
    """
    Layout of a local model store. Pure path arithmetic: nothing here touches disk.
    """
    store_root: Path

    # Subtrees
    def manifests(self) -> Path:
        return self.store_root / MANIFESTS_DIRNAME

    def manifest_file(self, registry: str, namespace: str, repository: str, tag: str) -> Path:
        """
        Return the manifest file for one tag of a model.
        """
        return self.manifests() / registry / namespace / repository / tag

    def blobs(self) -> Path:
        return self.store_root / BLOBS_DIRNAME

    def blob_file(self, filename: str) -> Path:
        """
        Return the path of a blob given its filesystem-safe digest name.
        """
        return self.blobs() / filename
