"""src/uriobject/uri/components.py

URI syntax splitting on top of urllib.parse.
"""

import logging
import re
import urllib.parse
from typing import NamedTuple, Optional, Tuple

from uriobject.exceptions import URISyntaxError

__all__ = ["UserInfo", "URIComponents", "split_uri"]

logger = logging.getLogger(__name__)

_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


class UserInfo(NamedTuple):
    """User information of an authority, percent-decoded."""

    username: str
    password: str
    password_set: bool


class URIComponents(NamedTuple):
    """
    Structured components of a URI.

    ``port`` is the raw text after the host's last colon, None when absent.
    It is not validated here. For opaque URIs such as ``mailto:a@b`` the text
    after the scheme is in ``opaque`` and ``path`` is empty.
    """

    scheme: str
    host: str
    port: Optional[str]
    path: str
    raw_query: str
    fragment: str
    user_info: Optional[UserInfo]
    opaque: str = ""


def _fail(uri: str, reason: str) -> URISyntaxError:
    return URISyntaxError(f"parse {uri!r}: {reason}")


def _check_characters(uri: str) -> None:
    for char in uri:
        if char == " ":
            raise _fail(uri, 'invalid character " " in URI')
        if ord(char) < 0x20 or ord(char) == 0x7F:
            raise _fail(uri, "net/url: invalid control character in URL")

    match = _BAD_ESCAPE.search(uri)
    if match:
        escape = uri[match.start() : match.start() + 3]
        raise _fail(uri, f"invalid URL escape {escape!r}")


def _split_user_info(uri: str, userinfo: str) -> UserInfo:
    username, sep, password = userinfo.partition(":")
    try:
        return UserInfo(
            urllib.parse.unquote(username, errors="strict"),
            urllib.parse.unquote(password, errors="strict"),
            bool(sep),
        )
    except UnicodeDecodeError as exc:
        raise _fail(uri, f"invalid UTF-8 in user info: {exc.reason}") from exc


def _split_host_port(uri: str, hostport: str) -> Tuple[str, Optional[str]]:
    if hostport.startswith("["):
        end = hostport.find("]") + 1
        if not end:
            raise _fail(uri, "missing ']' in host")
        host, rest = hostport[:end], hostport[end:]
        if rest and not rest.startswith(":"):
            raise _fail(uri, f"invalid port {rest!r} after host")
        port = rest[1:]
    else:
        host, sep, port = hostport.rpartition(":")
        if not sep:
            host, port = port, ""
    return host, port or None


def split_uri(uri: str) -> URIComponents:
    """
    Split ``uri`` into its components.

    The scheme is lower-cased; everything else is kept verbatim except the
    user information, which is percent-decoded.

    Raises:
        URISyntaxError: If ``uri`` is not a well-formed URI reference.
    """
    _check_characters(uri)

    try:
        parts = urllib.parse.urlsplit(uri)
    except ValueError as exc:
        raise _fail(uri, str(exc)) from exc

    if not parts.scheme and not parts.netloc:
        first_segment = parts.path.split("/", 1)[0]
        if first_segment.startswith(":"):
            raise _fail(uri, "missing protocol scheme")
        if ":" in first_segment:
            raise _fail(uri, "first path segment in URL cannot contain colon")

    userinfo, at, hostport = parts.netloc.rpartition("@")
    host, port = _split_host_port(uri, hostport)

    path, opaque = parts.path, ""
    if parts.scheme and not parts.netloc and not path.startswith("/"):
        path, opaque = "", path

    components = URIComponents(
        scheme=parts.scheme,
        host=host,
        port=port,
        path=path,
        raw_query=parts.query,
        fragment=parts.fragment,
        user_info=_split_user_info(uri, userinfo) if at else None,
        opaque=opaque,
    )
    logger.debug("Split %r into %r", uri, components)
    return components
