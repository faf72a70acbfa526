"""Domain value types for Agora.

Enumerations here are persisted by value, so members must never be
renumbered or renamed.
"""

from enum import Enum

from agora.domain.error import (
    InvalidActionStatusError,
    InvalidAnalysisFeedbackTypeError,
    InvalidReportStatusError,
    InvalidRestrictionAttributeError,
    InvalidVoteTypeError,
)


class VoteType(int, Enum):
    """Choice a participant casts on an opinion."""

    UNVOTED = 0
    AGREE = 1
    DISAGREE = 2
    PASS = 3

    @property
    def label(self) -> str:
        return self.name.lower()

    @classmethod
    def parse(cls, value: str) -> "VoteType":
        """Parse a vote type from its wire name.

        Only ``agree``, ``disagree`` and ``pass`` are accepted; ``unvoted``
        is a projection state and never a valid input.

        Raises:
            InvalidVoteTypeError: For any other value
        """
        try:
            parsed = cls[value.upper()]
        except (KeyError, AttributeError):
            raise InvalidVoteTypeError(value)
        if parsed is cls.UNVOTED:
            raise InvalidVoteTypeError(value)
        return parsed


class ReportReason(int, Enum):
    """Reason a participant gives when reporting an opinion."""

    INAPPROPRIATE = 1
    SPAM = 2
    HARASSMENT = 3
    OTHER = 4

    @property
    def label(self) -> str:
        return _REPORT_REASON_LABELS[self]

    @classmethod
    def from_code(cls, code: int) -> "ReportReason":
        """Map a reason code, treating unknown codes as ``OTHER``."""
        try:
            return cls(code)
        except ValueError:
            return cls.OTHER


_REPORT_REASON_LABELS = {
    ReportReason.INAPPROPRIATE: "不適切な内容",
    ReportReason.SPAM: "スパム・宣伝",
    ReportReason.HARASSMENT: "誹謗中傷・嫌がらせ",
    ReportReason.OTHER: "その他",
}


class ReportStatus(str, Enum):
    """Moderation state of a report."""

    UNSOLVED = "unsolved"
    DELETED = "deleted"
    HOLD = "hold"

    @classmethod
    def parse(cls, value: str) -> "ReportStatus":
        """Parse a report status.

        Raises:
            InvalidReportStatusError: If the value is not a known status
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidReportStatusError(value)


class ActionStatus(str, Enum):
    """Progress of a post-session action item."""

    NOT_STARTED = "未着手"
    IN_PROGRESS = "進行中"
    COMPLETED = "完了"
    PENDING = "保留"
    CANCELED = "破棄"

    @classmethod
    def parse(cls, value: str) -> "ActionStatus":
        """Parse an action status from its label.

        Raises:
            InvalidActionStatusError: If the label is unknown
        """
        try:
            return cls(value)
        except ValueError:
            raise InvalidActionStatusError(value)


class RestrictionAttributeKey(str, Enum):
    """Participation requirement a talk session may declare."""

    DEMOGRAPHICS_CITY = "demographics.city"
    DEMOGRAPHICS_PREFECTURE = "demographics.prefecture"
    DEMOGRAPHICS_GENDER = "demographics.gender"
    DEMOGRAPHICS_HOUSEHOLD_SIZE = "demographics.household_size"
    DEMOGRAPHICS_OCCUPATION = "demographics.occupation"
    DEMOGRAPHICS_BIRTH = "demographics.birth"
    AUTH_REGISTER = "auth.register"

    @classmethod
    def parse_all(cls, values: list[str]) -> list["RestrictionAttributeKey"]:
        """Parse restriction keys, skipping empty strings.

        Every key is checked before anything is returned so the caller
        sees all invalid keys at once.

        Raises:
            InvalidRestrictionAttributeError: Listing every unknown key
        """
        parsed: list[RestrictionAttributeKey] = []
        invalid: list[str] = []
        for value in values:
            if value == "":
                continue
            try:
                key = cls(value)
            except ValueError:
                invalid.append(value)
                continue
            if key not in parsed:
                parsed.append(key)
        if invalid:
            raise InvalidRestrictionAttributeError(invalid)
        return parsed


class AnalysisFeedbackType(str, Enum):
    """Reaction a participant leaves on a generated report."""

    GOOD = "good"
    BAD = "bad"

    @classmethod
    def parse(cls, value: str) -> "AnalysisFeedbackType":
        """Raises InvalidAnalysisFeedbackTypeError for anything but good/bad."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidAnalysisFeedbackTypeError(value)
