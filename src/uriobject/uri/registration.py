"""src/uriobject/uri/registration.py

Start-up registration of the URI class hierarchy.
"""

import logging
from typing import Optional

from uriobject.exceptions import RegistrationError
from uriobject.runtime.objects import BuiltinMethod, RClass, RObject
from uriobject.runtime.registry import Registry
from uriobject.uri.attributes import ATTRIBUTE_NAMES
from uriobject.uri.parse import HTTP, HTTPS, NAMESPACE, parse_uri
from uriobject.utils.config import URIConfig

__all__ = ["initialize_uri_class"]

logger = logging.getLogger(__name__)


def _validate_config(config: URIConfig) -> None:
    for scheme, port in config.default_ports.items():
        if isinstance(port, bool) or not isinstance(port, int) or port < 0:
            raise RegistrationError(f"invalid default port for {scheme!r}: {port!r}")
    if not isinstance(config.default_path, str):
        raise RegistrationError(f"invalid default path: {config.default_path!r}")


def initialize_uri_class(config: Optional[URIConfig] = None) -> Registry:
    """
    Declare ``URI``, ``URI::HTTP`` and ``URI::HTTPS``.

    HTTP carries the read/write attributes host, path, port, query, scheme,
    user and password; HTTPS inherits them. ``URI.parse`` is registered as a
    class method. All classes are frozen before returning.

    Args:
        config: Defaults kept on the returned registry for ``URI.parse``.

    Returns:
        Registry holding the ``URI`` namespace.

    Raises:
        RegistrationError: If ``config`` is unusable.
    """
    config = config or URIConfig()
    _validate_config(config)

    uri = RClass(NAMESPACE, is_module=True)
    http = RClass(HTTP)
    https = RClass(HTTPS, superclass=http, pseudo_superclass=http)

    uri.set_constant(http.name, http)
    uri.set_constant(https.name, https)

    http.set_attr_reader(ATTRIBUTE_NAMES)
    http.set_attr_writer(ATTRIBUTE_NAMES)

    registry = Registry({NAMESPACE: uri}, config)

    def parse(receiver: RClass, text: str) -> RObject:
        # pylint: disable=unused-argument
        return parse_uri(registry, text)

    uri.set_builtin_methods(
        [BuiltinMethod("parse", parse, arg_types=(str,))], class_methods=True
    )

    for cls in (uri, http, https):
        cls.freeze()

    logger.debug(
        "Registered %s with %s, %s (attributes: %s)",
        NAMESPACE,
        http.name,
        https.name,
        ", ".join(ATTRIBUTE_NAMES),
    )
    return registry
