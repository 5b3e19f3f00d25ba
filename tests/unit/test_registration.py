"""Unit tests for uriobject.uri.registration module."""

import pytest

from uriobject.exceptions import (
    FrozenClassError,
    InstantiationError,
    RegistrationError,
)
from uriobject.uri.attributes import ATTRIBUTE_NAMES
from uriobject.uri.registration import initialize_uri_class
from uriobject.utils.config import URIConfig


def test_registry_holds_uri_namespace(registry):
    """The registry exposes the URI namespace only."""
    assert list(registry) == ["URI"]
    uri = registry["URI"]
    assert uri.is_module
    assert set(uri.constants) == {"HTTP", "HTTPS"}


def test_https_subclasses_http(registry):
    """HTTPS has HTTP as superclass and pseudo superclass."""
    http = registry.lookup("URI::HTTP")
    https = registry.lookup("URI::HTTPS")
    assert https.superclass is http
    assert https.pseudo_superclass is http
    assert http.superclass is None
    assert https.is_a(http)
    assert not http.is_a(https)


@pytest.mark.parametrize("attr", ATTRIBUTE_NAMES)
def test_accessors_declared_on_http(registry, attr):
    """HTTP declares a reader and a writer per attribute; HTTPS inherits them."""
    http = registry.lookup("URI::HTTP")
    https = registry.lookup("URI::HTTPS")
    reader = http.find_method(attr)
    writer = http.find_method(f"{attr}=")
    assert reader is not None and reader.arity == 0
    assert writer is not None and writer.arity == 1
    assert https.find_method(attr) is reader
    assert https.find_method(f"{attr}=") is writer


def test_parse_is_a_class_method_of_uri(registry):
    """URI.parse is registered on the namespace, not on HTTP."""
    assert registry["URI"].find_class_method("parse") is not None
    assert registry.lookup("URI::HTTP").find_class_method("parse") is None
    assert registry.lookup("URI::HTTP").find_method("parse") is None


def test_uri_cannot_be_instantiated(registry):
    """The namespace is a module."""
    with pytest.raises(InstantiationError):
        registry["URI"].initialize_instance()


def test_classes_are_frozen(registry):
    """No declaration is possible after registration."""
    uri = registry["URI"]
    http = registry.lookup("URI::HTTP")
    https = registry.lookup("URI::HTTPS")
    assert uri.frozen and http.frozen and https.frozen
    with pytest.raises(FrozenClassError):
        uri.set_constant("FTP", http)
    with pytest.raises(FrozenClassError):
        http.set_attr_reader(["fragment"])
    with pytest.raises(FrozenClassError):
        https.set_attr_writer(["fragment"])


def test_constants_are_read_only(registry):
    """The constants view cannot be mutated."""
    with pytest.raises(TypeError):
        registry["URI"].constants["FTP"] = None  # type: ignore[index]


def test_registrations_are_independent():
    """Each call builds a distinct class hierarchy."""
    first = initialize_uri_class()
    second = initialize_uri_class()
    assert first["URI"] is not second["URI"]
    assert first.lookup("URI::HTTP") is not second.lookup("URI::HTTP")


def test_parse_uses_config():
    """URI.parse applies the config given at registration."""
    registry = initialize_uri_class(URIConfig(default_ports={"ftp": 21}))
    u = registry["URI"].send("parse", "ftp://example.com")
    assert u.port == 21
    assert registry["URI"].send("parse", "http://example.com").port is None


@pytest.mark.parametrize(
    "config",
    [
        URIConfig(default_ports={"http": "80"}),  # type: ignore[dict-item]
        URIConfig(default_ports={"http": -1}),
        URIConfig(default_ports={"http": True}),
        URIConfig(default_path=None),  # type: ignore[arg-type]
    ],
)
def test_invalid_config_is_fatal(config):
    """Misconfiguration fails registration."""
    with pytest.raises(RegistrationError):
        initialize_uri_class(config)


def test_registered_config_cannot_be_changed(vm):
    """Defaults validated at registration stay in force."""
    config = vm.registry.config
    with pytest.raises(TypeError):
        config.default_ports["http"] = "eighty"  # type: ignore[index]
    assert vm.call(vm.lookup("URI"), "parse", "http://x").port == 80


def test_registry_carries_config():
    """The registry keeps the config it was registered with."""
    config = URIConfig(default_ports={"ftp": 21})
    assert initialize_uri_class(config).config is config
    assert initialize_uri_class().config.default_ports == {"http": 80, "https": 443}
