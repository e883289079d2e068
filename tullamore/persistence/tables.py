"""SQLAlchemy table definitions for Tullamore.

These table definitions match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
)
from sqlalchemy.dialects import postgresql
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("username", String(255), nullable=False, unique=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# TAGS TABLE (name is the identity)
# ============================================================================
tags_table = Table(
    "tags",
    metadata,
    Column("name", String(64), primary_key=True),
    Column("description", String(500), nullable=True),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("title", String(300), nullable=False),
    Column("body", Text, nullable=True),
    Column(
        "created_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "modified_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column("last_updated_at", TIMESTAMP(timezone=True), nullable=True),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_created_by", questions_table.c.created_by)

# ============================================================================
# QUESTION_TAGS TABLE (junction table for many-to-many relationship)
# ============================================================================
question_tags_table = Table(
    "question_tags",
    metadata,
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "tag_name",
        String(64),
        ForeignKey("tags.name", ondelete="CASCADE", onupdate="CASCADE"),
        primary_key=True,
    ),
)

Index("idx_question_tags_tag_name", question_tags_table.c.tag_name)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "question_id",
        UUID,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "created_by", UUID, ForeignKey("users.id", ondelete="SET NULL"), nullable=True
    ),
    Column("body", Text, nullable=True),
    Column("chosen_answer", Boolean, nullable=False, server_default="false"),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)
Index("idx_answers_created_by", answers_table.c.created_by)

# ============================================================================
# VOTES TABLE (polymorphic: question or answer)
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column(
        "entry_type",
        postgresql.ENUM("question", "answer", name="entry_type", create_type=False),
        primary_key=True,
    ),
    Column("entry_id", UUID, primary_key=True),
    Column(
        "user_id",
        UUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
    ),
    Column(
        "vote_type",
        postgresql.ENUM("upvote", "downvote", name="vote_type", create_type=False),
        nullable=False,
    ),
)

Index("idx_votes_user_id", votes_table.c.user_id)
