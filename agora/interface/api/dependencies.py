"""Request dependencies shared by routes."""

from uuid import UUID

from fastapi import Header

from agora.interface.error import AuthenticationError


def current_user_id(x_user_id: str | None = Header(default=None)) -> str:
    """Acting user id, set by the authenticating gateway in ``X-User-Id``.

    Raises:
        AuthenticationError: If the header is missing or not a UUID
    """
    if not x_user_id:
        raise AuthenticationError("X-User-Id header is required")
    try:
        UUID(x_user_id)
    except ValueError:
        raise AuthenticationError("X-User-Id must be a UUID")
    return x_user_id


def optional_user_id(x_user_id: str | None = Header(default=None)) -> str | None:
    """Like ``current_user_id`` for public reads: no header means anonymous.

    Raises:
        AuthenticationError: If the header is present but not a UUID
    """
    if not x_user_id:
        return None
    return current_user_id(x_user_id)
