"""Domain layer errors.

Every error carries a stable ``code`` so the interface layer can render a
machine-readable payload. The four kind bases (validation, not found,
conflict, forbidden) decide the HTTP status; infrastructure failures are
not domain errors and propagate unchanged.
"""

from typing import Iterable


class DomainError(Exception):
    """Base domain error."""

    code: str = "domain_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(DomainError):
    """Domain validation error."""

    code = "validation_error"


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    code = "not_found"

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ConflictError(DomainError):
    """Raised when an operation was already performed or state forbids it."""

    code = "conflict"


class ForbiddenError(DomainError):
    """Raised when the caller is not allowed to perform the operation."""

    code = "forbidden"


# ---------------------------------------------------------------------------
# Not found
# ---------------------------------------------------------------------------


class TalkSessionNotFoundError(NotFoundError):
    code = "talk_session_not_found"

    def __init__(self, talk_session_id: object):
        super().__init__("Talk session", str(talk_session_id))


class OpinionNotFoundError(NotFoundError):
    code = "opinion_not_found"

    def __init__(self, opinion_id: object):
        super().__init__("Opinion", str(opinion_id))


class UserNotFoundError(NotFoundError):
    code = "user_not_found"

    def __init__(self, user_id: object):
        super().__init__("User", str(user_id))


class ActionItemNotFoundError(NotFoundError):
    code = "action_item_not_found"

    def __init__(self, action_item_id: object):
        super().__init__("Action item", str(action_item_id))


class AnalysisReportNotFoundError(NotFoundError):
    code = "analysis_report_not_found"

    def __init__(self, report_id: object):
        super().__init__("Analysis report", str(report_id))


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------


class InvalidIdentifierError(ValidationError):
    code = "identifier_invalid"

    def __init__(self, field: str, value: object):
        self.field = field
        super().__init__(f"{field} must be a UUID, got {value!r}")


class TalkSessionThemeError(ValidationError):
    code = "talk_session_theme_invalid"

    def __init__(self, length: int):
        super().__init__(f"Theme must be 1-100 characters, got {length}")


class TalkSessionDescriptionError(ValidationError):
    code = "talk_session_description_invalid"

    def __init__(self, length: int):
        super().__init__(f"Description must be at most 40000 characters, got {length}")


class InvalidScheduledEndTimeError(ValidationError):
    code = "scheduled_end_time_invalid"

    def __init__(self) -> None:
        super().__init__("Scheduled end time must be in the future")


class InvalidLocationError(ValidationError):
    code = "location_invalid"


class InvalidRestrictionAttributeError(ValidationError):
    """Raised with every unknown restriction key, not only the first."""

    code = "restriction_attribute_invalid"

    def __init__(self, keys: Iterable[str]):
        self.keys = list(keys)
        joined = ", ".join(repr(k) for k in self.keys)
        super().__init__(f"Invalid restriction attributes: {joined}")


class RestrictionNotSatisfiedError(ValidationError):
    code = "restriction_not_satisfied"

    def __init__(self, message: str, keys: Iterable[str] = ()):
        self.keys = list(keys)
        super().__init__(message)


class TalkSessionNotFinishedError(ValidationError):
    code = "talk_session_not_finished"

    def __init__(self, talk_session_id: object):
        super().__init__(f"Talk session {talk_session_id} has not finished yet")


class OpinionContentError(ValidationError):
    code = "opinion_content_invalid"

    def __init__(self, length: int):
        super().__init__(f"Opinion content must be 5-140 characters, got {length}")


class OpinionTitleError(ValidationError):
    code = "opinion_title_invalid"

    def __init__(self, length: int):
        super().__init__(f"Opinion title must be 5-50 characters, got {length}")


class OpinionParentIsSelfError(ValidationError):
    code = "opinion_parent_is_self"

    def __init__(self, opinion_id: object):
        super().__init__(f"Opinion {opinion_id} cannot reply to itself")


class OpinionTalkSessionRequiredError(ValidationError):
    code = "opinion_talk_session_required"

    def __init__(self) -> None:
        super().__init__("Either a talk session or a parent opinion is required")


class InvalidVoteTypeError(ValidationError):
    code = "vote_type_invalid"

    def __init__(self, value: object):
        super().__init__(f"Invalid vote type: {value!r}")


class VoteUnvoteNotAllowedError(ValidationError):
    code = "vote_unvote_not_allowed"

    def __init__(self) -> None:
        super().__init__("A vote cannot be cast as 'unvoted'")


class InvalidReportStatusError(ValidationError):
    code = "report_status_invalid"

    def __init__(self, value: object):
        super().__init__(f"Invalid report status: {value!r}")


class ActionItemContentError(ValidationError):
    code = "action_item_content_invalid"

    def __init__(self, length: int):
        super().__init__(f"Action item content must be 1-40 characters, got {length}")


class ActionItemSequenceError(ValidationError):
    code = "action_item_sequence_invalid"

    def __init__(self, sequence: int):
        super().__init__(f"Action item sequence must be >= 0, got {sequence}")


class InvalidAnalysisFeedbackTypeError(ValidationError):
    code = "analysis_feedback_type_invalid"

    def __init__(self, value: object):
        super().__init__(f"Invalid feedback type: {value!r}")


class InvalidActionStatusError(ValidationError):
    code = "action_item_status_invalid"

    def __init__(self, value: object):
        super().__init__(f"Invalid action item status: {value!r}")


class ConclusionContentError(ValidationError):
    code = "conclusion_content_invalid"

    def __init__(self, length: int):
        super().__init__(f"Conclusion must be 1-40000 characters, got {length}")


class InvalidDateOfBirthError(ValidationError):
    code = "date_of_birth_invalid"

    def __init__(self, value: object):
        super().__init__(f"Invalid date of birth: {value!r}")


class ImageDecodeError(ValidationError):
    code = "image_decode_failed"


class ImageValidationError(ValidationError):
    """Raised with every violated image rule."""

    code = "image_invalid"

    def __init__(self, problems: Iterable[str]):
        self.problems = list(problems)
        super().__init__("; ".join(self.problems))


# ---------------------------------------------------------------------------
# Conflict
# ---------------------------------------------------------------------------


class OpinionAlreadyVotedError(ConflictError):
    code = "opinion_already_voted"

    def __init__(self, opinion_id: object, user_id: object):
        self.opinion_id = opinion_id
        self.user_id = user_id
        super().__init__(f"User {user_id} already voted on opinion {opinion_id}")


class TalkSessionIsFinishedError(ConflictError):
    code = "talk_session_is_finished"

    def __init__(self, talk_session_id: object):
        super().__init__(f"Talk session {talk_session_id} has already finished")


class TalkSessionAlreadyConsentedError(ConflictError):
    code = "talk_session_already_consented"

    def __init__(self, talk_session_id: object, user_id: object):
        super().__init__(
            f"User {user_id} already consented to talk session {talk_session_id}"
        )


class TalkSessionConclusionAlreadySetError(ConflictError):
    code = "talk_session_conclusion_already_set"

    def __init__(self, talk_session_id: object):
        super().__init__(f"Talk session {talk_session_id} already has a conclusion")


class AnalysisReportAlreadyFeedbackedError(ConflictError):
    code = "analysis_report_already_feedbacked"

    def __init__(self, report_id: object, user_id: object):
        super().__init__(f"User {user_id} already gave feedback on report {report_id}")


class SessionAlreadyStartedError(ConflictError):
    code = "talk_session_already_started"

    def __init__(self, talk_session_id: object):
        super().__init__(f"Talk session {talk_session_id} has already started")


class SessionAlreadyEndedError(ConflictError):
    code = "talk_session_already_ended"

    def __init__(self, talk_session_id: object):
        super().__init__(f"Talk session {talk_session_id} has already ended")


# ---------------------------------------------------------------------------
# Forbidden
# ---------------------------------------------------------------------------


class TalkSessionNotOwnerError(ForbiddenError):
    code = "talk_session_not_owner"

    def __init__(self, talk_session_id: object, user_id: object):
        super().__init__(
            f"User {user_id} is not the owner of talk session {talk_session_id}"
        )


class OrganizationRequiredError(ForbiddenError):
    code = "organization_required"

    def __init__(self, user_id: object):
        super().__init__(f"User {user_id} must belong to an organization")
