"""SQLAlchemy table definitions for ballots.

They match the schema defined in Alembic migrations.
"""

from sqlalchemy import (
    Boolean,
    CheckConstraint,
    Column,
    ForeignKey,
    Index,
    Integer,
    MetaData,
    SmallInteger,
    String,
    Table,
    Text,
    UniqueConstraint,
)
from sqlalchemy.dialects.postgresql import TIMESTAMP, UUID

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# POLLS TABLE
# ============================================================================
polls_table = Table(
    "polls",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("name", String(255), nullable=False),
    Column("question", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("name", name="uq_poll_name"),
)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column("name", String(255), nullable=False),
    Column("position", Integer, nullable=False, server_default="0"),
    # Legacy stored counter, superseded by the computed tally
    Column("count", Integer, nullable=False, server_default="0"),
    UniqueConstraint("poll_id", "name", name="uq_answer_poll_name"),
)

Index("idx_answers_poll_id", answers_table.c.poll_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column(
        "answer_id", UUID, ForeignKey("answers.id", ondelete="CASCADE"), nullable=False
    ),
    Column("value", SmallInteger, nullable=False),
    Column("valid_until", TIMESTAMP(timezone=True), nullable=True),
    Column("is_invalid", Boolean, nullable=False, server_default="false"),
    Column("voter_id", String(255), nullable=True),  # Client-supplied "UUID"
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    CheckConstraint("value IN (-1, 1)", name="vote_value_signed_unit"),
)

Index("idx_votes_answer_id", votes_table.c.answer_id)
Index("idx_votes_voter_id", votes_table.c.voter_id)
# Sweep predicate: is_invalid = false AND valid_until < now
Index(
    "idx_votes_pending_expiry",
    votes_table.c.valid_until,
    postgresql_where=votes_table.c.is_invalid.is_(False),
)

# ============================================================================
# PARAMETERS TABLE
# ============================================================================
parameters_table = Table(
    "parameters",
    metadata,
    Column("id", UUID, primary_key=True, server_default="uuid_generate_v4()"),
    Column("poll_id", UUID, ForeignKey("polls.id", ondelete="CASCADE"), nullable=False),
    Column("key", String(255), nullable=False),
    Column("value", Text, nullable=False),
    Column(
        "created_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    Column(
        "updated_at", TIMESTAMP(timezone=True), nullable=False, server_default="NOW()"
    ),
    UniqueConstraint("poll_id", "key", name="uq_parameter_poll_key"),
)

Index("idx_parameters_key_value", parameters_table.c.key, parameters_table.c.value)
