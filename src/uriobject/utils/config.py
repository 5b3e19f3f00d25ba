"""utils/config.py

Parsing defaults configuration.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Mapping, Optional


def _default_ports() -> Mapping[str, int]:
    return {"http": 80, "https": 443}


@dataclass(frozen=True)
class URIConfig:
    """
    Defaults applied when a parsed URI leaves a component out.

    Attributes:
        default_ports: Port used per scheme when the URI carries no explicit port.
            Schemes missing from the table get no port at all. Stored as a
            read-only copy of the mapping given.
        default_path: Path used when the parsed path is empty.
    """

    default_ports: Mapping[str, int] = field(default_factory=_default_ports)
    default_path: str = "/"

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "default_ports", MappingProxyType(dict(self.default_ports))
        )

    def default_port(self, scheme: str) -> Optional[int]:
        """Return the default port for ``scheme``, or None when it has none."""
        return self.default_ports.get(scheme)
