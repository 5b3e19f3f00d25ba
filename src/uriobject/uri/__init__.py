"""src/uriobject/uri/__init__.py"""

from .attributes import ATTRIBUTE_NAMES, build_attributes, parse_port
from .components import URIComponents, UserInfo, split_uri
from .parse import parse_uri, select_class
from .registration import initialize_uri_class

__all__ = [
    "ATTRIBUTE_NAMES",
    "URIComponents",
    "UserInfo",
    "build_attributes",
    "initialize_uri_class",
    "parse_port",
    "parse_uri",
    "select_class",
    "split_uri",
]
