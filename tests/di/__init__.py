"""Mock providers for testing."""

from .coves import MockCovesProvider
from .container import build_test_container

__all__ = [
    "MockCovesProvider",
    "build_test_container",
]
