"""src/uriobject/exceptions.py

uriobject Exceptions hierarchy.
"""


class UriObjectError(Exception):
    """Base exception for all uriobject errors."""


class URIError(UriObjectError):
    """General exception for URI parsing errors."""


class URISyntaxError(URIError):
    """
    The input string is not a well-formed URI.
    Raised by the syntax layer; the message is surfaced unmodified.
    """


class PortFormatError(URIError):
    """An explicit port segment is present but is not a valid integer."""


class RuntimeObjectError(UriObjectError):
    """
    Base exception for host object runtime errors.
    """


class InstantiationError(RuntimeObjectError):
    """Attempt to instantiate a non-instantiable class (module)."""


class FrozenClassError(RuntimeObjectError):
    """Attempt to modify a class after registration froze it."""


class RegistrationError(RuntimeObjectError):
    """
    Fatal configuration error detected while registering classes.
    """


class NoMethodError(RuntimeObjectError):
    """Method could not be resolved on the receiver or its ancestors."""


class ArgumentError(RuntimeObjectError):
    """Built-in method called with the wrong number of arguments."""


class WrongArgumentTypeError(RuntimeObjectError):
    """Built-in method called with an argument of the wrong type."""


class UninitializedConstantError(RuntimeObjectError):
    """Constant lookup (e.g. ``URI::FTP``) found nothing."""
