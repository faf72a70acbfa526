"""SQLAlchemy table definitions for Agora.

Repositories use these with SQLAlchemy Core. They match the schema
defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    Double,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    PrimaryKeyConstraint,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import JSONB, TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (read model of the identity subsystem)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("display_id", String(30), nullable=True, unique=True),
    Column("display_name", String(50), nullable=True),
    Column("icon_url", Text, nullable=True),
    Column("organization_id", UUID, nullable=True),
    # Demographics
    Column("date_of_birth", Integer, nullable=True),  # YYYYMMDD
    Column("gender", String(20), nullable=True),
    Column("city", String(100), nullable=True),
    Column("prefecture", String(20), nullable=True),
    Column("occupation", String(50), nullable=True),
    Column("household_size", SmallInteger, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TALK SESSIONS TABLE
# ============================================================================
talk_sessions_table = Table(
    "talk_sessions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("owner_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("theme", String(100), nullable=False),
    Column("description", Text, nullable=True),
    Column("thumbnail_url", Text, nullable=True),
    Column("latitude", Double, nullable=True),
    Column("longitude", Double, nullable=True),
    Column("city", String(100), nullable=True),
    Column("prefecture", String(20), nullable=True),
    Column("scheduled_end_time", TIMESTAMP(timezone=True), nullable=False),
    Column("restrictions", JSONB, nullable=False, server_default="[]"),
    Column("hide_report", Boolean, nullable=False, server_default="false"),
    Column("show_top", Boolean, nullable=False, server_default="true"),
    Column("end_processed", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_talk_sessions_owner_id", talk_sessions_table.c.owner_id)
Index(
    "idx_talk_sessions_unprocessed_end",
    talk_sessions_table.c.scheduled_end_time,
    postgresql_where=talk_sessions_table.c.end_processed.is_(False),
)

# ============================================================================
# OPINIONS TABLE
# ============================================================================
opinions_table = Table(
    "opinions",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "talk_session_id",
        UUID,
        ForeignKey("talk_sessions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("author_id", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True),
    Column(
        "parent_opinion_id",
        UUID,
        ForeignKey("opinions.id", ondelete="CASCADE"),
        nullable=True,
    ),
    Column("title", String(50), nullable=True),
    Column("content", String(140), nullable=False),
    Column("reference_url", Text, nullable=True),
    Column("reference_image_url", Text, nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_opinions_talk_session_id", opinions_table.c.talk_session_id)
Index("idx_opinions_parent_opinion_id", opinions_table.c.parent_opinion_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "opinion_id", UUID, ForeignKey("opinions.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "talk_session_id",
        UUID,
        ForeignKey("talk_sessions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("vote_type", SmallInteger, nullable=False),  # 1=agree, 2=disagree, 3=pass
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("opinion_id", "user_id", name="uq_vote_opinion_user"),
)

Index("idx_votes_talk_session_id", votes_table.c.talk_session_id)

# ============================================================================
# REPORTS TABLE
# ============================================================================
reports_table = Table(
    "opinion_reports",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "opinion_id", UUID, ForeignKey("opinions.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "talk_session_id",
        UUID,
        ForeignKey("talk_sessions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "reporter_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column("reason", SmallInteger, nullable=False),
    Column("reason_text", Text, nullable=True),
    Column("status", String(20), nullable=False, server_default="unsolved"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_opinion_reports_opinion_id", reports_table.c.opinion_id)

# ============================================================================
# TALK SESSION CONSENTS TABLE
# ============================================================================
consents_table = Table(
    "talk_session_consents",
    metadata,
    Column(
        "talk_session_id",
        UUID,
        ForeignKey("talk_sessions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("user_id", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
    Column("restrictions", JSONB, nullable=False),
    Column(
        "consented_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("talk_session_id", "user_id", name="pk_talk_session_consent"),
)

# ============================================================================
# ACTION ITEMS TABLE (post-session timeline)
# ============================================================================
action_items_table = Table(
    "action_items",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "talk_session_id",
        UUID,
        ForeignKey("talk_sessions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("sequence", Integer, nullable=False),
    Column("content", String(40), nullable=False),
    Column("status", String(10), nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    # Checked at commit so renumbering may pass through duplicate states
    UniqueConstraint(
        "talk_session_id",
        "sequence",
        name="uq_action_item_sequence",
        deferrable=True,
        initially="DEFERRED",
    ),
)

# ============================================================================
# CONCLUSIONS TABLE
# ============================================================================
conclusions_table = Table(
    "talk_session_conclusions",
    metadata,
    Column(
        "talk_session_id",
        UUID,
        ForeignKey("talk_sessions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_by", UUID, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    PrimaryKeyConstraint("talk_session_id", name="pk_talk_session_conclusion"),
)

# ============================================================================
# ANALYSIS REPORTS TABLE (written by the analysis service)
# ============================================================================
analysis_reports_table = Table(
    "talk_session_reports",
    metadata,
    Column("id", UUID, primary_key=True),
    Column(
        "talk_session_id",
        UUID,
        ForeignKey("talk_sessions.id", ondelete="CASCADE"),
        nullable=False,
        unique=True,
    ),
    Column("report", Text, nullable=True),
    Column("feedbacks", JSONB, nullable=False, server_default="[]"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# DOMAIN EVENTS TABLE
# ============================================================================
domain_events_table = Table(
    "domain_events",
    metadata,
    Column("id", UUID, primary_key=True),
    Column("aggregate_id", UUID, nullable=False),
    Column("aggregate_type", String(50), nullable=False),
    Column("event_type", String(100), nullable=False),
    Column("payload", JSONB, nullable=False),
    Column("occurred_at", TIMESTAMP(timezone=True), nullable=False),
)

Index(
    "idx_domain_events_aggregate",
    domain_events_table.c.aggregate_type,
    domain_events_table.c.aggregate_id,
)
