"""src/uriobject/runtime/__init__.py

Host object runtime for uriobject.

This module provides the class/instance model parsed URIs are expressed in,
the immutable constant registry and the VM dispatch with its error channel.
"""

from .objects import BuiltinMethod, InstanceVariables, RClass, RObject, ivar_name
from .registry import Registry
from .vm import VM, ErrorObject

__all__ = [
    "BuiltinMethod",
    "InstanceVariables",
    "RClass",
    "RObject",
    "Registry",
    "VM",
    "ErrorObject",
    "ivar_name",
]
