# core/model_address.py
from __future__ import annotations

import os
from dataclasses import dataclass
from urllib.parse import urlunsplit

from modelpath.constants.tool_constants import (
    ALLOWED_PROTOCOL_SCHEMES,
    DEFAULT_NAMESPACE,
    DEFAULT_PROTOCOL_SCHEME,
    DEFAULT_REGISTRY,
    DEFAULT_TAG,
    INSECURE_PROTOCOL_SCHEME,
)
from modelpath.errors import InsecureProtocolError, InvalidAddressError, InvalidProtocolError

_SCHEME_SEPARATOR = "://"
_TAG_SEPARATOR = ":"
# Platform path separators other than "/" (e.g. "\\" on Windows)
_PATH_SEPARATORS = tuple(sep for sep in (os.sep, os.altsep) if sep and sep != "/")


@dataclass(frozen=True)
class ModelAddress:
    """
    Canonical, defaulted representation of a model identifier.

    Grammar: ``[scheme://][registry/][namespace/]repository[:tag]``.

    Parameters
    ----------
    scheme : str, default="https"
        Transport scheme used to fetch the model from its registry.
    registry : str, default="registry.ollama.ai"
        Host of the registry serving this model.
    namespace : str, default="library"
        Logical grouping under the registry.
    repository : str, default=""
        Model name. Required: an empty repository fails validation.
    tag : str, default="latest"
        Version/variant label. Must not contain ':'.

    Notes
    -----
    - Built fresh by :func:`parse_model_address`; immutable afterwards.
    - Parsing never fails. Call :meth:`validate` to reject malformed input.
    """

    scheme: str = DEFAULT_PROTOCOL_SCHEME
    registry: str = DEFAULT_REGISTRY
    namespace: str = DEFAULT_NAMESPACE
    repository: str = ""
    tag: str = DEFAULT_TAG

    @classmethod
    def parse(cls, raw: str) -> "ModelAddress":
        """Alias of :func:`parse_model_address`."""
        return parse_model_address(raw)

    def validate(self) -> None:
        """
        Raise InvalidAddressError if the address cannot name a model.

        Checked in order: empty repository, then a colon in the tag.
        """
        if self.repository == "":
            raise InvalidAddressError("invalid model path: model repository name is required")
        if _TAG_SEPARATOR in self.tag:
            raise InvalidAddressError("invalid model path: ':' (colon) is not allowed in tag names")

    def is_valid(self) -> bool:
        try:
            self.validate()
        except InvalidAddressError:
            return False
        return True

    # ----------------------------
    # Formatting
    # ----------------------------

    def namespace_repository(self) -> str:
        """Grouping key ``namespace/repository``."""
        return f"{self.namespace}/{self.repository}"

    def full_name(self) -> str:
        """``registry/namespace/repository:tag``, never elided."""
        return f"{self.registry}/{self.namespace}/{self.repository}:{self.tag}"

    def short_name(self) -> str:
        """
        Display form with defaults elided from the outside in.

        The namespace is only dropped when the registry was dropped as well.
        """
        if self.registry == DEFAULT_REGISTRY:
            if self.namespace == DEFAULT_NAMESPACE:
                return f"{self.repository}:{self.tag}"
            return f"{self.namespace}/{self.repository}:{self.tag}"
        return f"{self.registry}/{self.namespace}/{self.repository}:{self.tag}"

    def base_url(self, insecure: bool = False) -> str:
        """
        Return ``scheme://registry``, the root a fetcher builds request URLs on.

        Raises
        ------
        InvalidProtocolError
            If the scheme is not http or https.
        InsecureProtocolError
            If the scheme is http and `insecure` is False.
        """
        if self.scheme not in ALLOWED_PROTOCOL_SCHEMES:
            raise InvalidProtocolError(f"invalid protocol scheme '{self.scheme}'")
        if self.scheme == INSECURE_PROTOCOL_SCHEME and not insecure:
            raise InsecureProtocolError(f"insecure protocol http for registry '{self.registry}'")
        return urlunsplit((self.scheme, self.registry, "", "", ""))

    def __str__(self) -> str:
        return self.short_name()


def _normalize_separators(name: str) -> str:
    for sep in _PATH_SEPARATORS:
        name = name.replace(sep, "/")
    return name


def parse_model_address(raw: str) -> ModelAddress:
    """
    Parse a raw model identifier into a ModelAddress.

    Total: any string produces an address. Segment counts other than 1-3 leave
    the repository empty, which :meth:`ModelAddress.validate` then rejects.

    Examples
    --------
    >>> parse_model_address("myrepo").short_name()
    'myrepo:latest'
    >>> parse_model_address("example.com/ns/repo:v1").full_name()
    'example.com/ns/repo:v1'
    """
    scheme = DEFAULT_PROTOCOL_SCHEME
    registry = DEFAULT_REGISTRY
    namespace = DEFAULT_NAMESPACE
    repository = ""
    tag = DEFAULT_TAG

    before, found, after = raw.partition(_SCHEME_SEPARATOR)
    if found:
        scheme, raw = before, after

    parts = _normalize_separators(raw).split("/")
    if len(parts) == 3:
        registry, namespace, repository = parts
    elif len(parts) == 2:
        namespace, repository = parts
    elif len(parts) == 1:
        repository = parts[0]

    repo, found, rest = repository.partition(_TAG_SEPARATOR)
    if found:
        repository, tag = repo, rest

    return ModelAddress(
        scheme=scheme,
        registry=registry,
        namespace=namespace,
        repository=repository,
        tag=tag,
    )


def validate_model_address(address: ModelAddress) -> None:
    """Function form of :meth:`ModelAddress.validate`."""
    address.validate()


__all__ = ["ModelAddress", "parse_model_address", "validate_model_address"]
