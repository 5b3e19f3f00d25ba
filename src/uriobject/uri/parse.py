"""src/uriobject/uri/parse.py

Parse a URI string into an instance of URI::HTTP or URI::HTTPS.
"""

import logging
from typing import Optional

from uriobject.exceptions import URIError
from uriobject.runtime.objects import RClass, RObject, ivar_name
from uriobject.runtime.registry import Registry
from uriobject.uri.attributes import build_attributes
from uriobject.uri.components import split_uri
from uriobject.utils.config import URIConfig

__all__ = ["NAMESPACE", "HTTP", "HTTPS", "select_class", "parse_uri"]

logger = logging.getLogger(__name__)

NAMESPACE = "URI"
HTTP = "HTTP"
HTTPS = "HTTPS"


def select_class(namespace: RClass, scheme: str) -> RClass:
    """Return HTTPS for the exact scheme ``https``, HTTP for anything else."""
    if scheme == "https":
        return namespace.constants[HTTPS]
    return namespace.constants[HTTP]


def parse_uri(
    registry: Registry, uri: str, config: Optional[URIConfig] = None
) -> RObject:
    """
    Parse ``uri`` and build the matching URI object.

    Example::

        u = parse_uri(registry, "https://example.com")
        u.scheme  # "https"
        u.host    # "example.com"
        u.port    # 443
        u.path    # "/"

    Args:
        registry: Registry returned by :func:`initialize_uri_class`.
        uri: Raw URI text.
        config: Defaults to apply. Falls back to the config the registry was
            built with.

    Returns:
        A new URI::HTTP or URI::HTTPS instance with all seven attributes set.

    Raises:
        URISyntaxError: If ``uri`` is not well-formed.
        PortFormatError: If the explicit port is not numeric.
    """
    try:
        attrs = build_attributes(split_uri(uri), config or registry.config)
    except URIError as exc:
        logger.debug("Failed to parse %r: %s", uri, exc)
        raise

    cls = select_class(registry[NAMESPACE], attrs[ivar_name("scheme")])
    instance = cls.initialize_instance()
    instance.instance_variables.update(attrs)
    return instance
