"""Strongly typed identifiers for Agora domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

from agora.domain.error import InvalidIdentifierError

# Core domain entity identifiers
UserId = NewType("UserId", UUID)
TalkSessionId = NewType("TalkSessionId", UUID)
OpinionId = NewType("OpinionId", UUID)
VoteId = NewType("VoteId", UUID)
ReportId = NewType("ReportId", UUID)
ActionItemId = NewType("ActionItemId", UUID)
AnalysisReportId = NewType("AnalysisReportId", UUID)
ImageId = NewType("ImageId", UUID)


def parse_id(value: str, field: str) -> UUID:
    """Parse a client-supplied identifier.

    Raises:
        InvalidIdentifierError: If ``value`` is not a UUID
    """
    try:
        return UUID(value)
    except (TypeError, ValueError):
        raise InvalidIdentifierError(field, value)
