"""src/uriobject/utils/__init__.py"""

from .config import URIConfig

__all__ = ["URIConfig"]
