# tests/core/test_model_address.py
from __future__ import annotations

import os

import pytest

from modelpath.constants.tool_constants import (
    DEFAULT_NAMESPACE,
    DEFAULT_PROTOCOL_SCHEME,
    DEFAULT_REGISTRY,
    DEFAULT_TAG,
)
from modelpath.core.model_address import ModelAddress, parse_model_address, validate_model_address
from modelpath.errors import (
    InsecureProtocolError,
    InvalidAddressError,
    InvalidProtocolError,
    ModelPathError,
)


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("myrepo", ModelAddress(repository="myrepo")),
        ("myrepo:v2", ModelAddress(repository="myrepo", tag="v2")),
        ("ns/repo", ModelAddress(namespace="ns", repository="repo")),
        ("ns/repo:7b-q4", ModelAddress(namespace="ns", repository="repo", tag="7b-q4")),
        (
            "example.com/ns/repo:v1",
            ModelAddress(registry="example.com", namespace="ns", repository="repo", tag="v1"),
        ),
        (
            "http://localhost:5000/ns/repo",
            ModelAddress(scheme="http", registry="localhost:5000", namespace="ns", repository="repo"),
        ),
        ("https://repo:tag", ModelAddress(repository="repo", tag="tag")),
    ],
)
def test_parse_shapes(raw, expected):
    assert parse_model_address(raw) == expected


def test_defaults_filled_per_field():
    addr = parse_model_address("myrepo")
    assert addr.scheme == DEFAULT_PROTOCOL_SCHEME
    assert addr.registry == DEFAULT_REGISTRY
    assert addr.namespace == DEFAULT_NAMESPACE
    assert addr.tag == DEFAULT_TAG
    assert addr.short_name() == "myrepo:latest"
    assert addr.full_name() == f"{DEFAULT_REGISTRY}/{DEFAULT_NAMESPACE}/myrepo:latest"


def test_scheme_split_on_first_occurrence_only():
    addr = parse_model_address("a://b://c")
    assert addr.scheme == "a"
    # remaining "b://c" has three segments: "b:", "", "c"
    assert (addr.registry, addr.namespace, addr.repository) == ("b:", "", "c")


def test_tag_split_on_first_colon():
    addr = parse_model_address("repo:a:b")
    assert addr.repository == "repo"
    assert addr.tag == "a:b"
    with pytest.raises(InvalidAddressError, match="colon"):
        addr.validate()


@pytest.mark.parametrize("raw", ["", "a/b/c/d", "a/b/c/d/e:tag", ":tag", "ns/"])
def test_malformed_shapes_parse_but_fail_validation(raw):
    addr = parse_model_address(raw)
    assert addr.repository == ""
    with pytest.raises(InvalidAddressError, match="repository name is required"):
        addr.validate()
    assert not addr.is_valid()


def test_too_many_segments_keep_defaults():
    addr = parse_model_address("a/b/c/d")
    assert addr.registry == DEFAULT_REGISTRY
    assert addr.namespace == DEFAULT_NAMESPACE
    assert addr.tag == DEFAULT_TAG


def test_empty_repository_checked_before_tag():
    addr = ModelAddress(repository="", tag="x:y")
    with pytest.raises(InvalidAddressError, match="repository name is required"):
        validate_model_address(addr)


def test_validate_accepts_everything_else():
    # registry/namespace/scheme shapes are not checked
    ModelAddress(scheme="ftp", registry="", namespace="", repository="r", tag="").validate()
    assert parse_model_address("weird host/ns/repo").is_valid()


def test_invalid_address_error_hierarchy():
    assert issubclass(InvalidAddressError, ModelPathError)
    assert issubclass(InvalidAddressError, ValueError)


@pytest.mark.skipif(os.sep == "/", reason="needs a platform with a non-slash separator")
def test_native_separator_normalized():
    assert parse_model_address(f"ns{os.sep}repo") == parse_model_address("ns/repo")


def test_windows_separators_normalized(monkeypatch):
    import modelpath.core.model_address as mod

    monkeypatch.setattr(mod, "_PATH_SEPARATORS", ("\\",))
    addr = mod.parse_model_address("example.com\\ns\\repo:v1")
    assert addr == ModelAddress(registry="example.com", namespace="ns", repository="repo", tag="v1")


@pytest.mark.parametrize(
    "raw, short",
    [
        ("myrepo", "myrepo:latest"),
        ("library/myrepo", "myrepo:latest"),
        ("ns/myrepo:v1", "ns/myrepo:v1"),
        (f"{DEFAULT_REGISTRY}/ns/myrepo", "ns/myrepo:latest"),
        (f"{DEFAULT_REGISTRY}/library/myrepo:q4", "myrepo:q4"),
        ("example.com/ns/repo:v1", "example.com/ns/repo:v1"),
        # namespace is only elided together with the registry
        ("example.com/library/repo", "example.com/library/repo:latest"),
    ],
)
def test_short_name_elision(raw, short):
    addr = parse_model_address(raw)
    assert addr.short_name() == short
    assert str(addr) == short


def test_full_name_never_elides():
    addr = parse_model_address("example.com/ns/repo:v1")
    assert addr.full_name() == "example.com/ns/repo:v1"
    assert addr.namespace_repository() == "ns/repo"
    assert parse_model_address("repo").namespace_repository() == "library/repo"


@pytest.mark.parametrize("raw", ["myrepo", "myrepo:v1", "ns/myrepo", "library/repo:tag"])
def test_reparse_short_name_is_stable(raw):
    addr = parse_model_address(raw)
    assert parse_model_address(addr.short_name()) == addr


def test_reparse_full_name_keeps_fields():
    addr = parse_model_address("example.com/ns/repo:v1")
    assert parse_model_address(addr.full_name()) == addr


def test_address_is_immutable():
    addr = parse_model_address("repo")
    with pytest.raises(AttributeError):
        addr.tag = "other"  # type: ignore[misc]


def test_parse_classmethod_alias():
    assert ModelAddress.parse("ns/repo:v1") == parse_model_address("ns/repo:v1")


def test_base_url_https():
    assert parse_model_address("example.com/ns/repo").base_url() == "https://example.com"
    assert parse_model_address("repo").base_url() == f"https://{DEFAULT_REGISTRY}"


def test_base_url_http_requires_insecure():
    addr = parse_model_address("http://localhost:5000/ns/repo")
    with pytest.raises(InsecureProtocolError):
        addr.base_url()
    assert addr.base_url(insecure=True) == "http://localhost:5000"


def test_base_url_rejects_unknown_scheme():
    with pytest.raises(InvalidProtocolError):
        parse_model_address("ftp://host/ns/repo").base_url(insecure=True)
