"""Mock providers for testing."""

from .analysis import MockAnalysisProvider
from .clock import TEST_NOW, MockClockProvider
from .image import MockImageProvider
from .persistence import MockPersistenceProvider
from .container import build_test_container

__all__ = [
    "MockAnalysisProvider",
    "MockClockProvider",
    "MockImageProvider",
    "MockPersistenceProvider",
    "TEST_NOW",
    "build_test_container",
]
