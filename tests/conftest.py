"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import UUID, uuid4

from agora.domain.model import Demographics, Opinion, TalkSession, User
from agora.domain.repository import TalkSessionRepository, UserRepository
from agora.domain.value import OpinionId, TalkSessionId, UserId
from tests.di import TEST_NOW


def make_user(
    registered: bool = True,
    organization_id: Optional[UUID] = None,
    demographics: Optional[Demographics] = None,
) -> User:
    """Build a user. Unregistered users have no display id yet."""
    return User(
        id=UserId(uuid4()),
        display_id=f"user{uuid4().hex[:8]}" if registered else None,
        display_name="Test User" if registered else None,
        organization_id=organization_id,
        demographics=demographics,
    )


def make_talk_session(
    owner_id: UserId,
    now: datetime = TEST_NOW,
    ends_in: timedelta = timedelta(days=1),
    restrictions: Optional[list[str]] = None,
) -> TalkSession:
    """Build an open talk session ending ``ends_in`` after ``now``."""
    return TalkSession.create(
        theme="How should the riverside park be used?",
        owner_id=owner_id,
        scheduled_end_time=now + ends_in,
        now=now,
        restrictions=restrictions,
    )


def make_opinion(
    talk_session_id: TalkSessionId,
    author_id: UserId,
    content: str = "More benches along the river please",
    parent_opinion_id: Optional[OpinionId] = None,
    now: datetime = TEST_NOW,
) -> Opinion:
    return Opinion.create(
        talk_session_id=talk_session_id,
        author_id=author_id,
        content=content,
        now=now,
        parent_opinion_id=parent_opinion_id,
    )


async def seed_talk_session(
    env,
    restrictions: Optional[list[str]] = None,
    ends_in: timedelta = timedelta(days=1),
) -> tuple[User, TalkSession]:
    """Store an owner and an open talk session in a test container."""
    user_repo = await env.get(UserRepository)
    session_repo = await env.get(TalkSessionRepository)

    owner = await user_repo.save(make_user())
    talk_session = await session_repo.create(
        make_talk_session(owner.id, ends_in=ends_in, restrictions=restrictions)
    )
    return owner, talk_session


async def seed_user(env, **kwargs) -> User:
    user_repo = await env.get(UserRepository)
    return await user_repo.save(make_user(**kwargs))
