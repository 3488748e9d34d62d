"""Mock providers for testing."""

from .discord import MockDiscordProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockDiscordProvider",
    "MockPersistenceProvider",
    "build_test_container",
]
