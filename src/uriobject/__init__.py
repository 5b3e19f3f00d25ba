"""src/uriobject/__init__.py

uriobject - URI parsing into scheme-specific runtime objects.

A URI string is split with the standard library, its components are turned
into attributes with scheme-aware defaults, and an instance of ``URI::HTTP``
or ``URI::HTTPS`` is built on a small host object runtime.

Key Features:
    - Zero external dependencies
    - HTTP/HTTPS class dispatch with HTTP as the fallback
    - Default ports 80 and 443, default path "/"
    - Absent values kept distinct from empty ones
    - Immutable class registry built once at start-up

Example:
    Direct usage::

        from uriobject import parse

        u = parse("http://example.com:8080/a/b?x=1")
        u.port   # 8080
        u.query  # "x=1"

    Runtime usage::

        from uriobject import VM, initialize_uri_class

        vm = VM(initialize_uri_class())
        u = vm.call(vm.lookup("URI"), "parse", "https://example.com")
        vm.call(u, "port")  # 443
"""

import logging
from functools import lru_cache
from typing import Optional

from uriobject.exceptions import (
    PortFormatError,
    URIError,
    URISyntaxError,
    UriObjectError,
)
from uriobject.runtime import VM, ErrorObject, Registry, RObject
from uriobject.uri import initialize_uri_class, parse_uri
from uriobject.utils.config import URIConfig
from uriobject.version import __version__

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "parse",
    "default_registry",
    "initialize_uri_class",
    "parse_uri",
    "URIConfig",
    "VM",
    "ErrorObject",
    "Registry",
    "UriObjectError",
    "URIError",
    "URISyntaxError",
    "PortFormatError",
]


@lru_cache(maxsize=None)
def default_registry() -> Registry:
    """Registry built with the default configuration, created on first use."""
    return initialize_uri_class()


def parse(uri: str, registry: Optional[Registry] = None) -> RObject:
    """
    Parse ``uri`` into a URI::HTTP or URI::HTTPS instance.

    Raises:
        URISyntaxError: If ``uri`` is not well-formed.
        PortFormatError: If the explicit port is not numeric.
    """
    if registry is None:
        registry = default_registry()
    return parse_uri(registry, uri)
