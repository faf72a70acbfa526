"""Image decoding with Pillow."""

import io
import warnings

from PIL import Image, UnidentifiedImageError

from agora.domain.error import ImageDecodeError
from agora.domain.model.image import ImageMeta
from agora.domain.service import ImageInspector

# Refuse decompression bombs instead of only warning about them
Image.MAX_IMAGE_PIXELS = 100_000_000


class PillowImageInspector(ImageInspector):
    """Reads format and pixel size from the image header."""

    def inspect(self, data: bytes) -> ImageMeta:
        """Decode image metadata.

        Raises:
            ImageDecodeError: If the bytes are not a readable image
        """
        try:
            with warnings.catch_warnings():
                warnings.simplefilter("error", Image.DecompressionBombWarning)
                with Image.open(io.BytesIO(data)) as image:
                    image.verify()
                    fmt = image.format
                    width, height = image.size
        except (
            UnidentifiedImageError,
            Image.DecompressionBombError,
            Image.DecompressionBombWarning,
            OSError,
            SyntaxError,
        ) as e:
            raise ImageDecodeError(f"Could not decode image: {e}") from e

        if fmt is None:
            raise ImageDecodeError("Could not detect image format")

        return ImageMeta(
            size=len(data),
            mime=Image.MIME.get(fmt, f"image/{fmt.lower()}"),
            width=width,
            height=height,
        )
