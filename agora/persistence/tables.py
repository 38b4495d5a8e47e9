"""SQLAlchemy table definitions for Agora.

These tables match the schema created by the Alembic migrations. Column
types are portable so the same tables run on PostgreSQL and SQLite.
"""

from sqlalchemy import (
    Column,
    DateTime,
    Enum,
    ForeignKey,
    Index,
    MetaData,
    String,
    Table,
    Text,
    UniqueConstraint,
    Uuid,
    func,
)

# Metadata object for all tables
metadata = MetaData()

# ============================================================================
# USERS TABLE (wallet-connected accounts)
# ============================================================================
users_table = Table(
    "users",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column("wallet_address", String(255), nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    UniqueConstraint("wallet_address", name="uq_users_wallet_address"),
)

# ============================================================================
# QUESTIONS TABLE
# ============================================================================
questions_table = Table(
    "questions",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "asker_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "subject",
        Enum(
            "MATH",
            "PHYSICS",
            "CHEMISTRY",
            "COMPUTER_SCIENCE",
            name="subject",
            create_constraint=True,
        ),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)

Index("idx_questions_created_at", questions_table.c.created_at.desc())
Index("idx_questions_subject", questions_table.c.subject)

# ============================================================================
# ANSWERS TABLE
# ============================================================================
answers_table = Table(
    "answers",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "question_id",
        Uuid,
        ForeignKey("questions.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "responder_id",
        Uuid,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column("content", Text, nullable=False),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
)

Index("idx_answers_question_id", answers_table.c.question_id)

# ============================================================================
# VOTES TABLE
# ============================================================================
votes_table = Table(
    "votes",
    metadata,
    Column("id", Uuid, primary_key=True),
    Column(
        "answer_id",
        Uuid,
        ForeignKey("answers.id", ondelete="CASCADE"),
        nullable=False,
    ),
    Column(
        "voter_id", Uuid, ForeignKey("users.id", ondelete="CASCADE"), nullable=False
    ),
    Column(
        "created_at",
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    ),
    # One vote per voter per answer; concurrent casts race on this constraint
    UniqueConstraint("answer_id", "voter_id", name="uq_votes_answer_voter"),
)

Index("idx_votes_voter_id", votes_table.c.voter_id)
