"""initial_schema

Create the schema for Agora:
- Users (read model of the identity subsystem, with demographics)
- Talk sessions (scheduled discussion topics with restrictions)
- Opinions (short posts, threaded replies of unbounded depth)
- Votes (one per user per opinion)
- Opinion reports (moderation)
- Consents, conclusions and action items (session lifecycle)
- Analysis reports and domain events

Revision ID: 3f2c9d1a7b64
Revises:
Create Date: 2026-10-12 10:14:52.418305

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3f2c9d1a7b64"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _created_at() -> sa.Column:
    return sa.Column(
        "created_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def _updated_at() -> sa.Column:
    return sa.Column(
        "updated_at",
        sa.TIMESTAMP(timezone=True),
        nullable=False,
        server_default=sa.text("NOW()"),
    )


def upgrade() -> None:
    """Upgrade schema."""
    op.execute('CREATE EXTENSION IF NOT EXISTS "uuid-ossp"')

    # ========================================================================
    # USERS table
    # ========================================================================
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.UUID(),
            server_default=sa.text("uuid_generate_v4()"),
            nullable=False,
        ),
        sa.Column("display_id", sa.String(30), nullable=True),
        sa.Column("display_name", sa.String(50), nullable=True),
        sa.Column("icon_url", sa.Text(), nullable=True),
        sa.Column("organization_id", sa.UUID(), nullable=True),
        sa.Column("date_of_birth", sa.Integer(), nullable=True),  # YYYYMMDD
        sa.Column("gender", sa.String(20), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("prefecture", sa.String(20), nullable=True),
        sa.Column("occupation", sa.String(50), nullable=True),
        sa.Column("household_size", sa.SmallInteger(), nullable=True),
        _created_at(),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("display_id"),
    )

    # ========================================================================
    # TALK_SESSIONS table
    # ========================================================================
    op.create_table(
        "talk_sessions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("owner_id", sa.UUID(), nullable=False),
        sa.Column("theme", sa.String(100), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("thumbnail_url", sa.Text(), nullable=True),
        sa.Column("latitude", sa.Double(), nullable=True),
        sa.Column("longitude", sa.Double(), nullable=True),
        sa.Column("city", sa.String(100), nullable=True),
        sa.Column("prefecture", sa.String(20), nullable=True),
        sa.Column("scheduled_end_time", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.Column(
            "restrictions",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        sa.Column("hide_report", sa.Boolean(), nullable=False, server_default="false"),
        sa.Column("show_top", sa.Boolean(), nullable=False, server_default="true"),
        sa.Column(
            "end_processed", sa.Boolean(), nullable=False, server_default="false"
        ),
        _created_at(),
        sa.ForeignKeyConstraint(["owner_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("idx_talk_sessions_owner_id", "talk_sessions", ["owner_id"])
    # Sessions still waiting for end processing
    op.create_index(
        "idx_talk_sessions_unprocessed_end",
        "talk_sessions",
        ["scheduled_end_time"],
        postgresql_where=sa.text("end_processed = false"),
    )

    # ========================================================================
    # OPINIONS table
    # ========================================================================
    op.create_table(
        "opinions",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("talk_session_id", sa.UUID(), nullable=False),
        sa.Column("author_id", sa.UUID(), nullable=True),
        sa.Column("parent_opinion_id", sa.UUID(), nullable=True),
        sa.Column("title", sa.String(50), nullable=True),
        sa.Column("content", sa.String(140), nullable=False),
        sa.Column("reference_url", sa.Text(), nullable=True),
        sa.Column("reference_image_url", sa.Text(), nullable=True),
        _created_at(),
        sa.ForeignKeyConstraint(
            ["talk_session_id"], ["talk_sessions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["author_id"], ["users.id"], ondelete="SET NULL"),
        sa.ForeignKeyConstraint(
            ["parent_opinion_id"], ["opinions.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.CheckConstraint(
            "parent_opinion_id IS NULL OR parent_opinion_id <> id",
            name="ck_opinion_not_own_parent",
        ),
    )
    op.create_index("idx_opinions_talk_session_id", "opinions", ["talk_session_id"])
    op.create_index(
        "idx_opinions_parent_opinion_id", "opinions", ["parent_opinion_id"]
    )

    # ========================================================================
    # VOTES table
    # ========================================================================
    op.create_table(
        "votes",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("opinion_id", sa.UUID(), nullable=False),
        sa.Column("talk_session_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column(
            "vote_type", sa.SmallInteger(), nullable=False
        ),  # 1=agree, 2=disagree, 3=pass
        _created_at(),
        sa.ForeignKeyConstraint(["opinion_id"], ["opinions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["talk_session_id"], ["talk_sessions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("opinion_id", "user_id", name="uq_vote_opinion_user"),
        sa.CheckConstraint("vote_type IN (1, 2, 3)", name="ck_vote_type"),
    )
    op.create_index("idx_votes_talk_session_id", "votes", ["talk_session_id"])

    # ========================================================================
    # OPINION_REPORTS table
    # ========================================================================
    op.create_table(
        "opinion_reports",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("opinion_id", sa.UUID(), nullable=False),
        sa.Column("talk_session_id", sa.UUID(), nullable=False),
        sa.Column("reporter_id", sa.UUID(), nullable=False),
        sa.Column("reason", sa.SmallInteger(), nullable=False),
        sa.Column("reason_text", sa.Text(), nullable=True),
        sa.Column(
            "status", sa.String(20), nullable=False, server_default="unsolved"
        ),
        _created_at(),
        sa.ForeignKeyConstraint(["opinion_id"], ["opinions.id"], ondelete="CASCADE"),
        sa.ForeignKeyConstraint(
            ["talk_session_id"], ["talk_sessions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["reporter_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_opinion_reports_opinion_id", "opinion_reports", ["opinion_id"]
    )

    # ========================================================================
    # TALK_SESSION_CONSENTS table
    # ========================================================================
    op.create_table(
        "talk_session_consents",
        sa.Column("talk_session_id", sa.UUID(), nullable=False),
        sa.Column("user_id", sa.UUID(), nullable=False),
        sa.Column("restrictions", postgresql.JSONB(), nullable=False),
        sa.Column(
            "consented_at",
            sa.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.ForeignKeyConstraint(
            ["talk_session_id"], ["talk_sessions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["user_id"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint(
            "talk_session_id", "user_id", name="pk_talk_session_consent"
        ),
    )

    # ========================================================================
    # ACTION_ITEMS table
    # ========================================================================
    op.create_table(
        "action_items",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("talk_session_id", sa.UUID(), nullable=False),
        sa.Column("sequence", sa.Integer(), nullable=False),
        sa.Column("content", sa.String(40), nullable=False),
        sa.Column("status", sa.String(10), nullable=False),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(
            ["talk_session_id"], ["talk_sessions.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        # Checked at commit so renumbering may pass through duplicate states
        sa.UniqueConstraint(
            "talk_session_id",
            "sequence",
            name="uq_action_item_sequence",
            deferrable=True,
            initially="DEFERRED",
        ),
    )

    # ========================================================================
    # TALK_SESSION_CONCLUSIONS table
    # ========================================================================
    op.create_table(
        "talk_session_conclusions",
        sa.Column("talk_session_id", sa.UUID(), nullable=False),
        sa.Column("content", sa.Text(), nullable=False),
        sa.Column("created_by", sa.UUID(), nullable=False),
        _created_at(),
        sa.ForeignKeyConstraint(
            ["talk_session_id"], ["talk_sessions.id"], ondelete="CASCADE"
        ),
        sa.ForeignKeyConstraint(["created_by"], ["users.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("talk_session_id", name="pk_talk_session_conclusion"),
    )

    # ========================================================================
    # TALK_SESSION_REPORTS table (analysis output)
    # ========================================================================
    op.create_table(
        "talk_session_reports",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("talk_session_id", sa.UUID(), nullable=False),
        sa.Column("report", sa.Text(), nullable=True),
        sa.Column(
            "feedbacks",
            postgresql.JSONB(),
            nullable=False,
            server_default=sa.text("'[]'::jsonb"),
        ),
        _created_at(),
        _updated_at(),
        sa.ForeignKeyConstraint(
            ["talk_session_id"], ["talk_sessions.id"], ondelete="CASCADE"
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("talk_session_id"),
    )

    # ========================================================================
    # DOMAIN_EVENTS table
    # ========================================================================
    op.create_table(
        "domain_events",
        sa.Column("id", sa.UUID(), nullable=False),
        sa.Column("aggregate_id", sa.UUID(), nullable=False),
        sa.Column("aggregate_type", sa.String(50), nullable=False),
        sa.Column("event_type", sa.String(100), nullable=False),
        sa.Column("payload", postgresql.JSONB(), nullable=False),
        sa.Column("occurred_at", sa.TIMESTAMP(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        "idx_domain_events_aggregate",
        "domain_events",
        ["aggregate_type", "aggregate_id"],
    )

    # ========================================================================
    # TRIGGERS
    # ========================================================================
    op.execute("""
        CREATE OR REPLACE FUNCTION update_updated_at_column()
        RETURNS TRIGGER AS $$
        BEGIN
            NEW.updated_at = NOW();
            RETURN NEW;
        END;
        $$ LANGUAGE plpgsql
    """)

    op.execute("""
        CREATE TRIGGER update_action_items_updated_at
        BEFORE UPDATE ON action_items
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)

    op.execute("""
        CREATE TRIGGER update_talk_session_reports_updated_at
        BEFORE UPDATE ON talk_session_reports
        FOR EACH ROW EXECUTE FUNCTION update_updated_at_column()
    """)


def downgrade() -> None:
    """Downgrade schema."""
    op.execute(
        "DROP TRIGGER IF EXISTS update_talk_session_reports_updated_at "
        "ON talk_session_reports"
    )
    op.execute("DROP TRIGGER IF EXISTS update_action_items_updated_at ON action_items")
    op.execute("DROP FUNCTION IF EXISTS update_updated_at_column()")

    # Drop tables (in reverse order of dependencies)
    op.drop_table("domain_events")
    op.drop_table("talk_session_reports")
    op.drop_table("talk_session_conclusions")
    op.drop_table("action_items")
    op.drop_table("talk_session_consents")
    op.drop_table("opinion_reports")
    op.drop_table("votes")
    op.drop_table("opinions")
    op.drop_table("talk_sessions")
    op.drop_table("users")
