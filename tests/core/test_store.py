# tests/core/test_store.py
from __future__ import annotations

from modelpath.core.model_address import parse_model_address
from modelpath.core.path_resolver import PathResolver
from modelpath.core.store import ModelStore


def _write_manifest(resolver: PathResolver, name: str, payload: str = "{}") -> None:
    p = resolver.manifest_path(parse_model_address(name))
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(payload, encoding="utf-8")


def test_missing_store_yields_nothing(tmp_path):
    store = ModelStore(PathResolver(tmp_path / "absent"))
    assert list(store.iter_manifests()) == []
    assert list(store.iter_blobs()) == []
    assert store.du() == (0, 0)
    assert not (tmp_path / "absent").exists()


def test_iter_manifests_rebuilds_addresses(tmp_path):
    resolver = PathResolver(tmp_path / "store")
    _write_manifest(resolver, "zeta:v1")
    _write_manifest(resolver, "example.com/ns/repo:v2")
    _write_manifest(resolver, "team/alpha")
    # wrong depth is ignored
    stray = resolver.ensure_manifests_root() / "stray.json"
    stray.write_text("{}", encoding="utf-8")

    names = [e.address.short_name() for e in ModelStore(resolver).iter_manifests()]
    assert names == ["example.com/ns/repo:v2", "team/alpha:latest", "zeta:v1"]


def test_iter_blobs_only_digest_named_files(tmp_path, hex64):
    resolver = PathResolver(tmp_path / "store")
    resolver.blob_path(f"sha256:{hex64}").write_bytes(b"abc")
    (resolver.blobs_dir() / "sha256-partial").write_bytes(b"x")
    (resolver.blobs_dir() / "notes.txt").write_bytes(b"x")

    blobs = list(ModelStore(resolver).iter_blobs())
    assert [b.digest for b in blobs] == [f"sha256:{hex64}"]
    assert blobs[0].size == 3


def test_du_counts_manifests_and_blobs(tmp_path, hex64):
    resolver = PathResolver(tmp_path / "store")
    _write_manifest(resolver, "repo", payload="12345")
    resolver.blob_path(f"sha256:{hex64}").write_bytes(b"abc")
    assert ModelStore(resolver).du() == (2, 8)


def test_default_store_uses_config(store_root):
    assert ModelStore().root == store_root
