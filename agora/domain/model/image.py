"""Uploaded image metadata and validation rules."""

from datetime import datetime
from typing import Optional

from agora.domain.error import ImageValidationError
from agora.domain.value.common import ValueObject

MAX_IMAGE_BYTES = 4 * 1024 * 1024

REFERENCE_IMAGE_KEY_PATTERN = "ref/{year}/{month}/{day}/{opinion_id}.{extension}"


class ImageMeta(ValueObject):
    """Facts decoded from raw image bytes."""

    size: int
    mime: str  # e.g. "image/png"
    width: int
    height: int

    @property
    def extension(self) -> str:
        subtype = self.mime.split("/", 1)[-1]
        return "jpg" if subtype == "jpeg" else subtype

    @property
    def format(self) -> str:
        return self.mime.split("/", 1)[-1]


class ImageValidationRule(ValueObject):
    """Constraints an uploaded image must meet for one use.

    ``max_width``/``max_height`` bound the decoded pixel size and the
    aspect ratio is width divided by height.
    """

    name: str
    max_file_size: int = MAX_IMAGE_BYTES
    allowed_formats: tuple[str, ...] = ()
    max_width: Optional[int] = None
    max_height: Optional[int] = None
    min_aspect_ratio: Optional[float] = None
    max_aspect_ratio: Optional[float] = None

    def problems(self, meta: ImageMeta) -> list[str]:
        """Describe every rule ``meta`` violates."""
        problems: list[str] = []

        if self.max_file_size and meta.size > self.max_file_size:
            problems.append(
                f"file size {meta.size} exceeds {self.max_file_size} bytes"
            )

        if self.allowed_formats and meta.format not in self.allowed_formats:
            allowed = ", ".join(self.allowed_formats)
            problems.append(f"format {meta.format!r} is not one of: {allowed}")

        if self.max_width is not None and meta.width > self.max_width:
            problems.append(f"width {meta.width} exceeds {self.max_width}")
        if self.max_height is not None and meta.height > self.max_height:
            problems.append(f"height {meta.height} exceeds {self.max_height}")

        if meta.height > 0 and (
            self.min_aspect_ratio is not None or self.max_aspect_ratio is not None
        ):
            ratio = meta.width / meta.height
            if self.min_aspect_ratio is not None and ratio < self.min_aspect_ratio:
                problems.append(
                    f"aspect ratio {ratio:.2f} is below {self.min_aspect_ratio}"
                )
            if self.max_aspect_ratio is not None and ratio > self.max_aspect_ratio:
                problems.append(
                    f"aspect ratio {ratio:.2f} is above {self.max_aspect_ratio}"
                )

        return problems

    def check(self, meta: ImageMeta) -> None:
        """Raise if ``meta`` violates any rule.

        Raises:
            ImageValidationError: Listing every violation
        """
        problems = self.problems(meta)
        if problems:
            raise ImageValidationError(problems)


PROFILE_IMAGE_RULE = ImageValidationRule(
    name="profile",
    allowed_formats=("jpeg", "png"),
    max_width=300,
    max_height=300,
)
REFERENCE_IMAGE_RULE = ImageValidationRule(
    name="reference",
    allowed_formats=("jpeg", "png"),
)
TALK_SESSION_IMAGE_RULE = ImageValidationRule(
    name="talk_session",
    allowed_formats=("jpeg", "png"),
)
NO_RESTRICTION_RULE = ImageValidationRule(
    name="no_restriction",
    allowed_formats=("jpeg", "png", "gif"),
)


def reference_image_key(opinion_id: object, meta: ImageMeta, now: datetime) -> str:
    """Object key for an opinion's reference image."""
    return REFERENCE_IMAGE_KEY_PATTERN.format(
        year=now.year,
        month=now.month,
        day=now.day,
        opinion_id=opinion_id,
        extension=meta.extension,
    )
