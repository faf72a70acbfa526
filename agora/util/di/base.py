"""Provider base class and the names of swappable components."""

from typing import ClassVar, Literal

from dishka import Provider

# Infrastructure with a production and a test implementation
Component = Literal["persistence", "analysis", "image", "clock"]


class ProviderBase(Provider):
    """Common base so providers can be picked by metadata.

    A base that has subclasses is a swappable component: exactly one
    subclass sets ``__is_mock__`` to True. Layer providers without
    subclasses are always used as they are.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
    # Components that must also be real when this one is
    __depends_on__: ClassVar[frozenset[str]] = frozenset()
