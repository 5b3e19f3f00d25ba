import pytest

from uriobject.runtime import VM
from uriobject.uri import initialize_uri_class


@pytest.fixture
def registry():
    """Fixture providing a freshly registered URI class hierarchy."""
    return initialize_uri_class()


@pytest.fixture
def vm(registry):
    """Fixture providing a VM bound to the registry fixture."""
    return VM(registry)


@pytest.fixture
def uri_module(registry):
    """Fixture providing the URI namespace class."""
    return registry["URI"]
