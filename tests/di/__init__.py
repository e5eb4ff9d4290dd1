"""Mock providers for testing."""

from .mail import MockMailProvider
from .persistence import MockPersistenceProvider
from .site import MockSiteProvider
from .container import build_test_container

__all__ = [
    "MockMailProvider",
    "MockPersistenceProvider",
    "MockSiteProvider",
    "build_test_container",
]
