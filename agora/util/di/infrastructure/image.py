"""Image infrastructure providers."""

from dishka import Scope, provide

from agora.adapter.image import LocalImageStorage, PillowImageInspector
from agora.config import ImageSettings
from agora.domain.service import ImageInspector, ImageStorage
from agora.util.di.base import ProviderBase


class ImageProvider(ProviderBase):
    """Image component base."""

    __mock_component__ = "image"


class ProdImageProvider(ImageProvider):
    """Production image provider: Pillow decoding, local disk storage."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_image_inspector(self) -> ImageInspector:
        return PillowImageInspector()

    @provide(scope=Scope.APP)
    def get_image_storage(self, settings: ImageSettings) -> ImageStorage:
        return LocalImageStorage(settings)
