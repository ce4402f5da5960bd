# tests/core/test_public_api.py
from __future__ import annotations


def test_public_surface_imports():
    import modelpath as mp

    assert isinstance(mp.__version__, str)

    for name in (
        "ModelAddress",
        "parse_model_address",
        "PathResolver",
        "get_manifest_path",
        "ensure_manifests_root",
        "get_blobs_path",
        "InvalidAddressError",
        "InvalidDigestFormatError",
    ):
        assert hasattr(mp, name), name


def test_pipeline_end_to_end(store_root):
    import modelpath as mp

    addr = mp.parse_model_address("myrepo")
    mp.validate_model_address(addr)
    assert addr.short_name() == "myrepo:latest"
    assert mp.get_manifest_path(addr).is_relative_to(store_root / "manifests")
