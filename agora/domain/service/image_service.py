"""Contracts for image decoding and storage."""

from abc import ABC, abstractmethod

from agora.domain.model.image import ImageMeta


class ImageInspector(ABC):
    """Decodes raw bytes into image metadata."""

    @abstractmethod
    def inspect(self, data: bytes) -> ImageMeta:
        """Read size, MIME type and pixel bounds.

        Raises:
            ImageDecodeError: If the bytes are not a supported image
        """
        pass


class ImageStorage(ABC):
    """Stores validated images and returns their public URL."""

    @abstractmethod
    async def upload(self, key: str, meta: ImageMeta, data: bytes) -> str:
        pass

    @abstractmethod
    async def delete(self, key: str) -> None:
        """Remove an image. Missing keys are ignored."""
        pass
