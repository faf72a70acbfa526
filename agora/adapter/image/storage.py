"""Image storage backends."""

import asyncio
from pathlib import Path

import logfire

from agora.adapter.error import ImageStorageError
from agora.config import ImageSettings
from agora.domain.model.image import ImageMeta
from agora.domain.service import ImageStorage


class LocalImageStorage(ImageStorage):
    """Writes images below a directory served at ``public_base_url``."""

    def __init__(self, settings: ImageSettings) -> None:
        self.root = Path(settings.storage_dir)
        self.public_base_url = settings.public_base_url.rstrip("/")

    async def upload(self, key: str, meta: ImageMeta, data: bytes) -> str:
        """Store ``data`` under ``key`` and return its public URL.

        Raises:
            ImageStorageError: If the file cannot be written
        """
        path = self.root / key
        try:
            await asyncio.to_thread(self._write, path, data)
        except OSError as e:
            logfire.error("Image write failed", key=key, error=str(e))
            raise ImageStorageError(f"Could not store image {key}: {e}") from e

        logfire.info("Image stored", key=key, mime=meta.mime, size=meta.size)
        return f"{self.public_base_url}/{key}"

    async def delete(self, key: str) -> None:
        """
        Raises:
            ImageStorageError: If the file exists but cannot be removed
        """
        path = self.root / key
        try:
            await asyncio.to_thread(path.unlink, missing_ok=True)
        except OSError as e:
            logfire.error("Image delete failed", key=key, error=str(e))
            raise ImageStorageError(f"Could not delete image {key}: {e}") from e

        logfire.info("Image deleted", key=key)

    @staticmethod
    def _write(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)


class InMemoryImageStorage(ImageStorage):
    """Keeps uploaded images in a dict, for testing."""

    def __init__(self, public_base_url: str = "https://images.test") -> None:
        self.public_base_url = public_base_url
        self.objects: dict[str, bytes] = {}
        self.fail_with: Exception | None = None

    async def upload(self, key: str, meta: ImageMeta, data: bytes) -> str:
        if self.fail_with is not None:
            raise self.fail_with
        self.objects[key] = data
        return f"{self.public_base_url}/{key}"

    async def delete(self, key: str) -> None:
        self.objects.pop(key, None)
