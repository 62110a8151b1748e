"""Mock providers for testing."""

from .persistence import InMemoryStore, MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "InMemoryStore",
    "MockPersistenceProvider",
    "build_test_container",
]
