"""Unit tests for uriobject.runtime.vm module."""

import pytest

from uriobject.exceptions import UninitializedConstantError
from uriobject.runtime import ErrorObject


def test_parse_through_vm(vm):
    """URI.parse dispatched through the VM returns an instance."""
    u = vm.call(vm.lookup("URI"), "parse", "https://example.com")
    assert u.cls is vm.lookup("URI::HTTPS")
    assert vm.call(u, "port") == 443
    assert vm.call(u, "path") == "/"
    assert vm.call(u, "query") is None


def test_accessors_through_vm(vm):
    """Writers return the written value and readers see it."""
    u = vm.call(vm.lookup("URI"), "parse", "http://example.com")
    assert vm.call(u, "host=", "example.org") == "example.org"
    assert vm.call(u, "host") == "example.org"
    assert vm.call(u, "port=", None) is None
    assert vm.call(u, "port") is None


def test_syntax_error_becomes_error_object(vm):
    """Syntax failures surface on the error channel, message unmodified."""
    result = vm.call(vm.lookup("URI"), "parse", "not a uri")
    assert isinstance(result, ErrorObject)
    assert result.error_class == "URISyntaxError"
    assert result.message == "parse 'not a uri': invalid character \" \" in URI"


def test_port_error_becomes_error_object(vm):
    """Non-numeric ports surface on the error channel."""
    result = vm.call(vm.lookup("URI"), "parse", "http://example.com:abc")
    assert result == ErrorObject("PortFormatError", 'parsing "abc": invalid port syntax')


@pytest.mark.parametrize(
    "args, error_class",
    [
        ((), "ArgumentError"),
        (("a", "b"), "ArgumentError"),
        ((42,), "WrongArgumentTypeError"),
        ((None,), "WrongArgumentTypeError"),
    ],
)
def test_argument_checks(vm, args, error_class):
    """Arguments are checked before parse runs."""
    result = vm.call(vm.lookup("URI"), "parse", *args)
    assert isinstance(result, ErrorObject)
    assert result.error_class == error_class


def test_unknown_method(vm):
    """Undefined methods yield a NoMethodError object."""
    result = vm.call(vm.lookup("URI::HTTP"), "parse", "http://example.com")
    assert result == ErrorObject("NoMethodError", "Undefined Method 'parse' for HTTP")


def test_error_object_str():
    """ErrorObject renders as 'class: message'."""
    assert str(ErrorObject("URISyntaxError", "boom")) == "URISyntaxError: boom"


def test_lookup_undefined_constant(vm):
    """Constant lookup failures raise to the embedding code."""
    with pytest.raises(UninitializedConstantError):
        vm.lookup("URI::FTP")
