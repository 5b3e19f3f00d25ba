"""src/uriobject/uri/attributes.py

Attribute derivation and defaulting for parsed URIs.
"""

from typing import Any, Dict, Optional

from uriobject.exceptions import PortFormatError
from uriobject.runtime.objects import ivar_name
from uriobject.uri.components import URIComponents
from uriobject.utils.config import URIConfig

__all__ = ["ATTRIBUTE_NAMES", "build_attributes", "parse_port"]

ATTRIBUTE_NAMES = ("host", "path", "port", "query", "scheme", "user", "password")


def parse_port(port: str) -> int:
    """
    Convert an explicit port string to an integer.

    Raises:
        PortFormatError: If ``port`` is not a decimal integer.
    """
    if not (port.isascii() and port.isdigit()):
        raise PortFormatError(f'parsing "{port}": invalid port syntax')
    return int(port)


def build_attributes(
    components: URIComponents, config: Optional[URIConfig] = None
) -> Dict[str, Any]:
    """
    Derive the instance variables of a URI object from its components.

    Every attribute is present in the result; None marks an absent value.

    Args:
        components: Output of :func:`split_uri`.
        config: Defaults to apply. Uses :class:`URIConfig` defaults if omitted.

    Returns:
        Mapping of instance variable name (``@host``, ...) to value.

    Raises:
        PortFormatError: If the explicit port is not numeric.
    """
    config = config or URIConfig()

    attrs: Dict[str, Any] = {ivar_name(name): None for name in ATTRIBUTE_NAMES}
    attrs[ivar_name("path")] = config.default_path

    attrs[ivar_name("scheme")] = components.scheme
    attrs[ivar_name("host")] = components.host

    if components.port is None:
        # Unknown schemes keep port absent rather than zero
        attrs[ivar_name("port")] = config.default_port(components.scheme)
    else:
        attrs[ivar_name("port")] = parse_port(components.port)

    if components.path:
        attrs[ivar_name("path")] = components.path

    if components.raw_query:
        attrs[ivar_name("query")] = components.raw_query

    user_info = components.user_info
    if user_info is not None:
        if user_info.username:
            attrs[ivar_name("user")] = user_info.username
        # An empty password is still a password
        if user_info.password_set:
            attrs[ivar_name("password")] = user_info.password

    return attrs
