"""Unit tests for HTTP error mapping."""

from uuid import uuid4

import pytest

from agora.domain.error import (
    InvalidVoteTypeError,
    OpinionAlreadyVotedError,
    RestrictionNotSatisfiedError,
    TalkSessionNotFoundError,
    TalkSessionNotOwnerError,
)
from agora.interface.api.dependencies import current_user_id
from agora.interface.error import AuthenticationError, status_for


class TestStatusFor:
    def test_not_found(self):
        assert status_for(TalkSessionNotFoundError(uuid4())) == 404

    def test_validation(self):
        assert status_for(InvalidVoteTypeError("maybe")) == 400

    def test_conflict(self):
        assert status_for(OpinionAlreadyVotedError(uuid4(), uuid4())) == 409

    def test_forbidden(self):
        assert status_for(TalkSessionNotOwnerError(uuid4(), uuid4())) == 403

    def test_restriction_is_validation(self):
        error = RestrictionNotSatisfiedError("Gender required", ["demographics.gender"])

        assert status_for(error) == 400


class TestCurrentUserId:
    def test_accepts_uuid(self):
        user_id = str(uuid4())

        assert current_user_id(user_id) == user_id

    @pytest.mark.parametrize("value", [None, "", "not-a-uuid"])
    def test_rejects_missing_or_malformed(self, value):
        with pytest.raises(AuthenticationError):
            current_user_id(value)
