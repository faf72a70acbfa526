"""Mappers for converting between database rows and domain models.

Domain models are Pydantic models, so rows are mapped by hand instead of
through SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from agora.domain.model import (
    ActionItem,
    AnalysisFeedback,
    AnalysisReport,
    Conclusion,
    DateOfBirth,
    Demographics,
    DomainEvent,
    Location,
    Opinion,
    Report,
    TalkSession,
    TalkSessionConsent,
    User,
    Vote,
)
from agora.domain.value import (
    ActionItemId,
    ActionStatus,
    AnalysisReportId,
    OpinionId,
    ReportId,
    ReportReason,
    ReportStatus,
    RestrictionAttributeKey,
    TalkSessionId,
    UserId,
    VoteId,
    VoteType,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def _optional_uuid(value: Any) -> UUID | None:
    return _uuid(value) if value is not None else None


# ---------------------------------------------------------------------------
# User
# ---------------------------------------------------------------------------


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Stored birth dates that are not real calendar dates are dropped.
    """
    return User(
        id=UserId(_uuid(row["id"])),
        display_id=row.get("display_id"),
        display_name=row.get("display_name"),
        icon_url=row.get("icon_url"),
        organization_id=_optional_uuid(row.get("organization_id")),
        demographics=Demographics(
            date_of_birth=DateOfBirth.parse(row.get("date_of_birth")),
            gender=row.get("gender"),
            city=row.get("city"),
            prefecture=row.get("prefecture"),
            occupation=row.get("occupation"),
            household_size=row.get("household_size"),
        ),
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    demographics = user.demographics or Demographics()
    return {
        "id": user.id,
        "display_id": user.display_id,
        "display_name": user.display_name,
        "icon_url": user.icon_url,
        "organization_id": user.organization_id,
        "date_of_birth": (
            demographics.date_of_birth.root if demographics.date_of_birth else None
        ),
        "gender": demographics.gender,
        "city": demographics.city,
        "prefecture": demographics.prefecture,
        "occupation": demographics.occupation,
        "household_size": demographics.household_size,
    }


# ---------------------------------------------------------------------------
# Talk session
# ---------------------------------------------------------------------------


def row_to_talk_session(row: Dict[str, Any]) -> TalkSession:
    """Convert database row to TalkSession domain model.

    Args:
        row: Database row as dict

    Returns:
        TalkSession domain model
    """
    location = None
    if row.get("latitude") is not None and row.get("longitude") is not None:
        location = Location(latitude=row["latitude"], longitude=row["longitude"])

    return TalkSession(
        id=TalkSessionId(_uuid(row["id"])),
        owner_id=UserId(_uuid(row["owner_id"])),
        theme=row["theme"],
        description=row.get("description"),
        thumbnail_url=row.get("thumbnail_url"),
        location=location,
        city=row.get("city"),
        prefecture=row.get("prefecture"),
        scheduled_end_time=row["scheduled_end_time"],
        created_at=row["created_at"],
        restrictions=[RestrictionAttributeKey(key) for key in row["restrictions"] or []],
        hide_report=row["hide_report"],
        show_top=row["show_top"],
        end_processed=row["end_processed"],
    )


def talk_session_to_dict(talk_session: TalkSession) -> Dict[str, Any]:
    """Convert TalkSession domain model to database dict.

    Args:
        talk_session: TalkSession domain model

    Returns:
        Dict suitable for database insertion/update
    """
    location = talk_session.location
    return {
        "id": talk_session.id,
        "owner_id": talk_session.owner_id,
        "theme": talk_session.theme,
        "description": talk_session.description,
        "thumbnail_url": talk_session.thumbnail_url,
        "latitude": location.latitude if location else None,
        "longitude": location.longitude if location else None,
        "city": talk_session.city,
        "prefecture": talk_session.prefecture,
        "scheduled_end_time": talk_session.scheduled_end_time,
        "created_at": talk_session.created_at,
        "restrictions": [key.value for key in talk_session.restrictions],
        "hide_report": talk_session.hide_report,
        "show_top": talk_session.show_top,
        "end_processed": talk_session.end_processed,
    }


# ---------------------------------------------------------------------------
# Opinion, vote, report
# ---------------------------------------------------------------------------


def row_to_opinion(row: Dict[str, Any]) -> Opinion:
    """Convert database row to Opinion domain model."""
    return Opinion(
        id=OpinionId(_uuid(row["id"])),
        talk_session_id=TalkSessionId(_uuid(row["talk_session_id"])),
        author_id=_optional_uuid(row.get("author_id")),
        parent_opinion_id=_optional_uuid(row.get("parent_opinion_id")),
        title=row.get("title"),
        content=row["content"],
        created_at=row["created_at"],
        reference_url=row.get("reference_url"),
        reference_image_url=row.get("reference_image_url"),
    )


def opinion_to_dict(opinion: Opinion) -> Dict[str, Any]:
    # replies and vote_status are excluded on the model
    return opinion.model_dump()


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model."""
    return Vote(
        id=VoteId(_uuid(row["id"])),
        opinion_id=OpinionId(_uuid(row["opinion_id"])),
        talk_session_id=TalkSessionId(_uuid(row["talk_session_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        vote_type=VoteType(row["vote_type"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    data = vote.model_dump()
    data["vote_type"] = vote.vote_type.value
    return data


def row_to_report(row: Dict[str, Any]) -> Report:
    """Convert database row to Report domain model."""
    return Report(
        id=ReportId(_uuid(row["id"])),
        opinion_id=OpinionId(_uuid(row["opinion_id"])),
        talk_session_id=TalkSessionId(_uuid(row["talk_session_id"])),
        reporter_id=UserId(_uuid(row["reporter_id"])),
        reason=ReportReason.from_code(row["reason"]),
        reason_text=row.get("reason_text"),
        status=ReportStatus.parse(row["status"]),
        created_at=row["created_at"],
    )


def report_to_dict(report: Report) -> Dict[str, Any]:
    data = report.model_dump()
    data["reason"] = report.reason.value
    data["status"] = report.status.value
    return data


# ---------------------------------------------------------------------------
# Consent, conclusion, action item
# ---------------------------------------------------------------------------


def row_to_consent(row: Dict[str, Any]) -> TalkSessionConsent:
    return TalkSessionConsent(
        talk_session_id=TalkSessionId(_uuid(row["talk_session_id"])),
        user_id=UserId(_uuid(row["user_id"])),
        consented_at=row["consented_at"],
        restrictions=[RestrictionAttributeKey(key) for key in row["restrictions"]],
    )


def consent_to_dict(consent: TalkSessionConsent) -> Dict[str, Any]:
    return {
        "talk_session_id": consent.talk_session_id,
        "user_id": consent.user_id,
        "consented_at": consent.consented_at,
        "restrictions": [key.value for key in consent.restrictions],
    }


def row_to_conclusion(row: Dict[str, Any]) -> Conclusion:
    return Conclusion(
        talk_session_id=TalkSessionId(_uuid(row["talk_session_id"])),
        content=row["content"],
        created_by=UserId(_uuid(row["created_by"])),
        created_at=row["created_at"],
    )


def conclusion_to_dict(conclusion: Conclusion) -> Dict[str, Any]:
    return conclusion.model_dump()


def row_to_action_item(row: Dict[str, Any]) -> ActionItem:
    return ActionItem(
        id=ActionItemId(_uuid(row["id"])),
        talk_session_id=TalkSessionId(_uuid(row["talk_session_id"])),
        sequence=row["sequence"],
        content=row["content"],
        status=ActionStatus.parse(row["status"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def action_item_to_dict(action_item: ActionItem) -> Dict[str, Any]:
    data = action_item.model_dump()
    data["status"] = action_item.status.value
    return data


# ---------------------------------------------------------------------------
# Analysis report, domain events
# ---------------------------------------------------------------------------


def row_to_analysis_report(row: Dict[str, Any]) -> AnalysisReport:
    return AnalysisReport(
        id=AnalysisReportId(_uuid(row["id"])),
        talk_session_id=TalkSessionId(_uuid(row["talk_session_id"])),
        report=row.get("report"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        feedbacks=[AnalysisFeedback.model_validate(f) for f in row["feedbacks"] or []],
    )


def analysis_report_to_dict(report: AnalysisReport) -> Dict[str, Any]:
    data = report.model_dump(exclude={"feedbacks"})
    # JSONB column needs JSON-native values
    data["feedbacks"] = [f.model_dump(mode="json") for f in report.feedbacks]
    return data


def domain_event_to_dict(event: DomainEvent) -> Dict[str, Any]:
    return {
        "id": event.id,
        "aggregate_id": event.aggregate_id,
        "aggregate_type": event.aggregate_type,
        "event_type": event.event_type,
        "payload": event.payload(),
        "occurred_at": event.occurred_at,
    }
