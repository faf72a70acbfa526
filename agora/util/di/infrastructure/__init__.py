"""Infrastructure providers."""

# Import bases
from .analysis import AnalysisProvider
from .clock import ClockProvider
from .image import ImageProvider
from .persistence import PersistenceProvider

# Import implementations (needed for __subclasses__())
from .analysis import ProdAnalysisProvider  # noqa: F401
from .clock import ProdClockProvider  # noqa: F401
from .image import ProdImageProvider  # noqa: F401
from .persistence import ProdPersistenceProvider  # noqa: F401

__all__ = [
    "AnalysisProvider",
    "ClockProvider",
    "ImageProvider",
    "PersistenceProvider",
    "ProdAnalysisProvider",
    "ProdClockProvider",
    "ProdImageProvider",
    "ProdPersistenceProvider",
]
