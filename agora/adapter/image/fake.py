"""Image inspector stand-in for tests."""

from agora.domain.error import ImageDecodeError
from agora.domain.model.image import ImageMeta
from agora.domain.service import ImageInspector


class FakeImageInspector(ImageInspector):
    """Returns preset metadata instead of decoding.

    Empty input is treated as undecodable.
    """

    def __init__(self) -> None:
        self.mime = "image/png"
        self.width = 100
        self.height = 100

    def inspect(self, data: bytes) -> ImageMeta:
        if not data:
            raise ImageDecodeError("Could not decode image: empty input")
        return ImageMeta(
            size=len(data), mime=self.mime, width=self.width, height=self.height
        )
