"""src/uriobject/runtime/vm.py

Method dispatch with the host runtime's error channel.
"""

import logging
from typing import Any, Union

from uriobject.exceptions import UriObjectError
from uriobject.runtime.objects import RClass, RObject
from uriobject.runtime.registry import Registry

__all__ = ["ErrorObject", "VM"]

logger = logging.getLogger(__name__)


class ErrorObject:
    """
    Error value delivered to the calling script instead of a result.

    Attributes:
        error_class: Name of the error class (e.g. ``"URISyntaxError"``).
        message: Error message, unmodified from its source.
    """

    __slots__ = ("error_class", "message")

    def __init__(self, error_class: str, message: str) -> None:
        self.error_class = error_class
        self.message = message

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ErrorObject):
            return NotImplemented
        return (self.error_class, self.message) == (other.error_class, other.message)

    def __hash__(self) -> int:
        return hash((self.error_class, self.message))

    def __str__(self) -> str:
        return f"{self.error_class}: {self.message}"

    def __repr__(self) -> str:
        return f"<ErrorObject {self}>"


class VM:
    """
    Entry point scripts call into.

    Holds the registry built at start-up and turns errors raised by
    built-in methods into ErrorObject values.
    """

    __slots__ = ("registry",)

    def __init__(self, registry: Registry) -> None:
        self.registry = registry

    def lookup(self, path: str) -> RClass:
        """Resolve a constant such as ``URI`` or ``URI::HTTP``."""
        return self.registry.lookup(path)

    def call(self, receiver: Union[RClass, RObject], name: str, *args: Any) -> Any:
        """
        Dispatch ``name`` on ``receiver``.

        Returns:
            The method's result, or an ErrorObject if the call failed.
        """
        try:
            return receiver.send(name, *args)
        except UriObjectError as exc:
            logger.debug("%r.%s raised %s: %s", receiver, name, type(exc).__name__, exc)
            return ErrorObject(type(exc).__name__, str(exc))
