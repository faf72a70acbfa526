"""Image adapters."""

from .fake import FakeImageInspector
from .pillow import PillowImageInspector
from .storage import InMemoryImageStorage, LocalImageStorage

__all__ = [
    "FakeImageInspector",
    "InMemoryImageStorage",
    "LocalImageStorage",
    "PillowImageInspector",
]
