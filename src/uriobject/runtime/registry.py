"""src/uriobject/runtime/registry.py

Immutable table of global constants produced at start-up.
"""

from types import MappingProxyType
from typing import Iterator, Mapping, Optional

from uriobject.exceptions import UninitializedConstantError
from uriobject.runtime.objects import RClass
from uriobject.utils.config import URIConfig

__all__ = ["Registry"]


class Registry(Mapping[str, RClass]):
    """
    Read-only mapping of global constant names to classes.

    Nested constants are reached with ``lookup("URI::HTTPS")``.

    Attributes:
        config: Parsing defaults the registered classes were set up with.
    """

    __slots__ = ("_constants", "config")

    def __init__(
        self, constants: Mapping[str, RClass], config: Optional[URIConfig] = None
    ) -> None:
        self._constants: Mapping[str, RClass] = MappingProxyType(dict(constants))
        self.config = config or URIConfig()

    def __getitem__(self, name: str) -> RClass:
        return self._constants[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._constants)

    def __len__(self) -> int:
        return len(self._constants)

    def lookup(self, path: str) -> RClass:
        """
        Resolve a ``::``-separated constant path.

        Raises:
            UninitializedConstantError: If any segment is not defined.
        """
        head, *rest = path.split("::")
        try:
            cls = self._constants[head]
            for name in rest:
                cls = cls.constants[name]
        except KeyError as exc:
            raise UninitializedConstantError(f"uninitialized constant {path}") from exc
        return cls

    def __repr__(self) -> str:
        return f"<Registry {sorted(self._constants)}>"
