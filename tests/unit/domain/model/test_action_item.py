"""Unit tests for action items."""

from uuid import uuid4

import pytest

from agora.domain.error import ActionItemContentError, ActionItemSequenceError
from agora.domain.model import ActionItem
from agora.domain.value import ActionItemId, ActionStatus, TalkSessionId
from tests.di import TEST_NOW


def _item(**overrides) -> ActionItem:
    fields = dict(
        id=ActionItemId(uuid4()),
        talk_session_id=TalkSessionId(uuid4()),
        sequence=0,
        content="Hold a follow-up meeting",
        status=ActionStatus.NOT_STARTED,
        created_at=TEST_NOW,
        updated_at=TEST_NOW,
    )
    fields.update(overrides)
    return ActionItem(**fields)


class TestActionItem:
    @pytest.mark.parametrize("content", ["", "x" * 41])
    def test_rejects_invalid_content(self, content):
        with pytest.raises(ActionItemContentError):
            _item(content=content)

    def test_rejects_negative_sequence(self):
        with pytest.raises(ActionItemSequenceError):
            _item(sequence=-1)

    def test_update_status_touches_updated_at(self):
        item = _item()
        later = TEST_NOW.replace(hour=18)

        item.update_status(ActionStatus.COMPLETED, later)

        assert item.status is ActionStatus.COMPLETED
        assert item.updated_at == later

    def test_update_content_is_validated(self):
        item = _item()

        with pytest.raises(ActionItemContentError):
            item.update_content("x" * 41, TEST_NOW)
