"""Unit tests for image validation rules."""

from datetime import datetime, timezone

import pytest

from agora.domain.error import ImageValidationError
from agora.domain.model import ImageMeta
from agora.domain.model.image import (
    MAX_IMAGE_BYTES,
    PROFILE_IMAGE_RULE,
    REFERENCE_IMAGE_RULE,
    ImageValidationRule,
    reference_image_key,
)


def _meta(mime="image/png", size=1024, width=100, height=100) -> ImageMeta:
    return ImageMeta(size=size, mime=mime, width=width, height=height)


class TestImageValidationRule:
    def test_valid_reference_image(self):
        REFERENCE_IMAGE_RULE.check(_meta())

    def test_rejects_disallowed_format(self):
        with pytest.raises(ImageValidationError) as exc_info:
            REFERENCE_IMAGE_RULE.check(_meta(mime="image/gif"))

        assert "gif" in exc_info.value.message

    def test_rejects_oversized_file(self):
        with pytest.raises(ImageValidationError):
            REFERENCE_IMAGE_RULE.check(_meta(size=MAX_IMAGE_BYTES + 1))

    def test_reports_every_problem(self):
        meta = _meta(mime="image/webp", width=301, height=301)

        problems = PROFILE_IMAGE_RULE.problems(meta)

        assert len(problems) == 3

    def test_aspect_ratio_bounds(self):
        rule = ImageValidationRule(
            name="banner", min_aspect_ratio=1.5, max_aspect_ratio=3.0
        )

        rule.check(_meta(width=200, height=100))
        with pytest.raises(ImageValidationError):
            rule.check(_meta(width=100, height=100))
        with pytest.raises(ImageValidationError):
            rule.check(_meta(width=400, height=100))


class TestReferenceImageKey:
    def test_key_layout(self):
        now = datetime(2025, 3, 7, tzinfo=timezone.utc)

        key = reference_image_key("abc", _meta(mime="image/jpeg"), now)

        assert key == "ref/2025/3/7/abc.jpg"
