"""src/uriobject/runtime/objects.py

Class descriptors, instances and built-in methods of the host object runtime.

This module provides the pieces a scripting-level object model needs:
classes with superclass links, instance variable storage, generated
attribute accessors and built-in methods with argument checking.
"""

from types import MappingProxyType
from typing import (
    Any,
    Callable,
    Dict,
    Iterable,
    Iterator,
    Mapping,
    Optional,
    Sequence,
    Tuple,
)

from uriobject.exceptions import (
    ArgumentError,
    FrozenClassError,
    InstantiationError,
    NoMethodError,
    WrongArgumentTypeError,
)

__all__ = ["BuiltinMethod", "InstanceVariables", "RClass", "RObject", "ivar_name"]


def ivar_name(attr: str) -> str:
    """Return the instance variable name backing attribute ``attr``."""
    return f"@{attr}"


class BuiltinMethod:
    """
    A method implemented in Python and exposed to the runtime.

    Attributes:
        name: Method name as seen by the runtime (writers end with ``=``).
        fn: Callable invoked as ``fn(receiver, *args)``.
        arg_types: One entry per expected argument; each entry is the type
            the argument must be an instance of.
    """

    __slots__ = ("name", "fn", "arg_types")

    def __init__(
        self,
        name: str,
        fn: Callable[..., Any],
        arg_types: Sequence[type] = (),
    ) -> None:
        self.name = name
        self.fn = fn
        self.arg_types: Tuple[type, ...] = tuple(arg_types)

    @property
    def arity(self) -> int:
        """Number of arguments the method takes."""
        return len(self.arg_types)

    def invoke(self, receiver: Any, args: Sequence[Any]) -> Any:
        """
        Check ``args`` against the declared signature and call the method.

        Raises:
            ArgumentError: If the argument count does not match.
            WrongArgumentTypeError: If an argument has the wrong type.
        """
        if len(args) != self.arity:
            raise ArgumentError(
                f"Expect {self.arity} argument(s) for {self.name}. got: {len(args)}"
            )
        for index, (arg, expected) in enumerate(zip(args, self.arg_types)):
            if not isinstance(arg, expected):
                raise WrongArgumentTypeError(
                    f"Expect argument #{index + 1} of {self.name} to be "
                    f"{expected.__name__}. got: {type(arg).__name__}"
                )
        return self.fn(receiver, *args)

    def __repr__(self) -> str:
        return f"<BuiltinMethod {self.name}/{self.arity}>"


class InstanceVariables(Mapping[str, Any]):
    """
    Named slots of an instance.

    Unset slots read as None (the absent-marker).
    """

    __slots__ = ("_vars",)

    def __init__(self) -> None:
        self._vars: Dict[str, Any] = {}

    def __getitem__(self, name: str) -> Any:
        return self._vars[name]

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def get(self, name: str, default: Any = None) -> Any:
        return self._vars.get(name, default)

    def set(self, name: str, value: Any) -> Any:
        """Set a single slot and return the value written."""
        self._vars[name] = value
        return value

    def update(self, values: Mapping[str, Any]) -> None:
        """Bulk-assign slots."""
        self._vars.update(values)


def _make_reader(attr: str) -> BuiltinMethod:
    name = ivar_name(attr)

    def reader(receiver: "RObject") -> Any:
        return receiver.instance_variables.get(name)

    return BuiltinMethod(attr, reader)


def _make_writer(attr: str) -> BuiltinMethod:
    name = ivar_name(attr)

    def writer(receiver: "RObject", value: Any) -> Any:
        return receiver.instance_variables.set(name, value)

    return BuiltinMethod(f"{attr}=", writer, arg_types=(object,))


class RClass:
    """
    A named class of the host runtime.

    Attributes:
        name: Class name.
        is_module: Modules only namespace constants and cannot be instantiated.
        superclass: Direct superclass, used for ``is_a`` checks and class
            method resolution.
        pseudo_superclass: Parent used to resolve instance methods.
    """

    # pylint: disable=too-many-instance-attributes
    __slots__ = (
        "name",
        "is_module",
        "superclass",
        "pseudo_superclass",
        "_constants",
        "_methods",
        "_class_methods",
        "_frozen",
    )

    def __init__(
        self,
        name: str,
        is_module: bool = False,
        superclass: Optional["RClass"] = None,
        pseudo_superclass: Optional["RClass"] = None,
    ) -> None:
        self.name = name
        self.is_module = is_module
        self.superclass = superclass
        self.pseudo_superclass = pseudo_superclass or superclass
        self._constants: Dict[str, "RClass"] = {}
        self._methods: Dict[str, BuiltinMethod] = {}
        self._class_methods: Dict[str, BuiltinMethod] = {}
        self._frozen = False

    @property
    def constants(self) -> Mapping[str, "RClass"]:
        """Read-only view of the constants namespaced under this class."""
        return MappingProxyType(self._constants)

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Reject any further declaration on this class."""
        self._frozen = True

    def _check_frozen(self) -> None:
        if self._frozen:
            raise FrozenClassError(f"can't modify frozen class: {self.name}")

    def set_constant(self, name: str, target: "RClass") -> None:
        self._check_frozen()
        self._constants[name] = target

    def set_builtin_methods(
        self, methods: Iterable[BuiltinMethod], class_methods: bool = False
    ) -> None:
        """Register built-in methods as instance methods or class methods."""
        self._check_frozen()
        table = self._class_methods if class_methods else self._methods
        for method in methods:
            table[method.name] = method

    def set_attr_reader(self, attrs: Iterable[str]) -> None:
        """Generate a reader returning the slot value (or None) per attribute."""
        self.set_builtin_methods(_make_reader(attr) for attr in attrs)

    def set_attr_writer(self, attrs: Iterable[str]) -> None:
        """Generate an ``attr=`` writer returning the written value per attribute."""
        self.set_builtin_methods(_make_writer(attr) for attr in attrs)

    def ancestors(self) -> Iterator["RClass"]:
        """Iterate over this class and its superclasses, nearest first."""
        cls: Optional[RClass] = self
        while cls is not None:
            yield cls
            cls = cls.superclass

    def is_a(self, other: "RClass") -> bool:
        return any(cls is other for cls in self.ancestors())

    def find_method(self, name: str) -> Optional[BuiltinMethod]:
        """Resolve an instance method along the pseudo-superclass chain."""
        cls: Optional[RClass] = self
        while cls is not None:
            method = cls._methods.get(name)
            if method is not None:
                return method
            cls = cls.pseudo_superclass
        return None

    def find_class_method(self, name: str) -> Optional[BuiltinMethod]:
        for cls in self.ancestors():
            method = cls._class_methods.get(name)
            if method is not None:
                return method
        return None

    def send(self, name: str, *args: Any) -> Any:
        """Call class method ``name`` with this class as the receiver."""
        method = self.find_class_method(name)
        if method is None:
            raise NoMethodError(f"Undefined Method '{name}' for {self.name}")
        return method.invoke(self, args)

    def initialize_instance(self) -> "RObject":
        """Create a new, empty instance of this class."""
        if self.is_module:
            raise InstantiationError(f"{self.name} is a module and can't be instantiated")
        return RObject(self)

    def __repr__(self) -> str:
        return f"<RClass {self.name}>"


class RObject:
    """
    An instance of an RClass.

    Declared attributes are reachable through ``send`` and as Python
    attributes::

        obj.send("port")        # reader
        obj.send("port=", 8080) # writer
        obj.port = 8080         # same writer
    """

    __slots__ = ("cls", "instance_variables")

    def __init__(self, cls: RClass) -> None:
        self.cls = cls
        self.instance_variables = InstanceVariables()

    def send(self, name: str, *args: Any) -> Any:
        """Call instance method ``name`` on this object."""
        method = self.cls.find_method(name)
        if method is None:
            raise NoMethodError(f"Undefined Method '{name}' for {self.cls.name}")
        return method.invoke(self, args)

    def is_a(self, cls: RClass) -> bool:
        return self.cls.is_a(cls)

    def __getattr__(self, name: str) -> Any:
        if name.startswith("_") or name in RObject.__slots__:
            raise AttributeError(name)
        method = self.cls.find_method(name)
        if method is None or method.arity != 0:
            raise AttributeError(
                f"{self.cls.name!r} object has no attribute {name!r}"
            )
        return method.invoke(self, ())

    def __setattr__(self, name: str, value: Any) -> None:
        if name in RObject.__slots__:
            object.__setattr__(self, name, value)
            return
        method = self.cls.find_method(f"{name}=")
        if method is None:
            raise AttributeError(
                f"{self.cls.name!r} object has no writable attribute {name!r}"
            )
        method.invoke(self, (value,))

    def __repr__(self) -> str:
        values = ", ".join(
            f"{name}={value!r}" for name, value in self.instance_variables.items()
        )
        return f"<{self.cls.name} {values}>"
